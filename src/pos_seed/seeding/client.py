"""REST adapter for the POS backend.

Wraps the four calls the seeders need:

    POST /app/user/login      -> {"data": {"accessToken": ...}}
    GET  /app/branch?limit=1  -> {"data": [Branch, ...]}
    GET  /master/item         -> {"data": [Item, ...]} or {"data": {"rows": [...]}}
    POST /transaction/sales   -> {"data": ...}

Every response is wrapped as ``{"data": ..., "metaData": {...}}``. The item
list endpoint has been seen returning both a bare list and a paginated
``{"rows": [...]}`` object; that guessing lives here and nowhere else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pos_seed.config import DEFAULT_RETRIES, DEFAULT_TIMEOUT, SeedConfig
from pos_seed.exceptions import ApiError

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = {
    "code": "PUSAT",
    "name": "Hasmart Utama",
    "address": "Jl Raya Sruwen-Karanggede KM.10 Susukan,Semarang",
    "phone": "081229706622",
}

ITEM_FETCH_LIMIT = 2000


# ------------------------- Typed views -------------------------
@dataclass
class Branch:
    id: int
    name: str
    code: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> Branch:
        return cls(id=int(data["id"]), name=str(data.get("name") or ""), code=str(data.get("code") or ""))


@dataclass
class CatalogVariant:
    id: int
    unit: str
    amount: float = 1
    sell_price: float = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> CatalogVariant:
        return cls(
            id=int(data["id"]),
            unit=str(data.get("unit") or ""),
            amount=float(data.get("amount") or 1),
            # Decimal columns come back as strings
            sell_price=float(data.get("sellPrice") or 0),
        )


@dataclass
class CatalogItem:
    id: int
    code: str
    name: str
    variants: List[CatalogVariant] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> CatalogItem:
        return cls(
            id=int(data["id"]),
            code=str(data.get("code") or ""),
            name=str(data.get("name") or ""),
            variants=[CatalogVariant.from_api(v) for v in data.get("masterItemVariants") or []],
        )


# ------------------------- Session -------------------------
def make_session(
    timeout: float = DEFAULT_TIMEOUT, retries: int = DEFAULT_RETRIES
) -> requests.Session:
    """Create a requests Session with retry logic and default timeout.

    Configures the session with:
    - JSON Accept header
    - Retry adapter for HTTP/HTTPS with exponential backoff
    - Default timeout for all requests

    POST is not retried on status codes so a sales transaction is never
    created twice.

    Args:
        timeout: Default timeout in seconds for all requests.
        retries: Number of retry attempts.

    Returns:
        Configured requests.Session object.
    """
    s = requests.Session()
    s.headers.update({"Accept": "application/json"})
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=0.8,  # 0.8, 1.6, 3.2, ...
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET", "HEAD", "OPTIONS"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("http://", adapter)
    s.mount("https://", adapter)
    orig_request = s.request

    def timed_request(method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return orig_request(method, url, **kwargs)

    s.request = timed_request  # type: ignore[method-assign,assignment]
    return s


def ensure_ok(resp: requests.Response, msg: str) -> None:
    """Raise ApiError unless the response status is 2xx."""
    if not (200 <= resp.status_code < 300):
        body = resp.text or ""
        raise ApiError(f"{msg}. HTTP {resp.status_code}: {body[:400]}", resp.status_code, body)


def unwrap_data(resp: requests.Response, msg: str) -> Any:
    """Return the ``data`` member of a JSON envelope."""
    ensure_ok(resp, msg)
    try:
        payload = resp.json()
    except ValueError as e:
        raise ApiError(f"{msg}: response is not JSON", resp.status_code, resp.text) from e
    if not isinstance(payload, dict) or "data" not in payload:
        raise ApiError(f"{msg}: response has no 'data' member", resp.status_code, resp.text)
    return payload["data"]


def rows_from_list_payload(data: Any) -> List[Dict[str, Any]]:
    """Accept either a bare list or a ``{"rows": [...]}`` page."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("rows"), list):
        return data["rows"]
    return []


# ------------------------- Client -------------------------
class SeedApiClient:
    """Thin client over the backend REST API.

    Args:
        base_url: API base URL, e.g. ``http://localhost:9999/api``.
        session: Optional pre-built session (tests inject a fake one).
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else make_session()

    @classmethod
    def from_config(cls, config: SeedConfig) -> SeedApiClient:
        return cls(config.api_base, make_session(config.timeout, config.retries))

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get(self, path: str, msg: str, **kwargs: Any) -> Any:
        try:
            resp = self.session.get(self._url(path), **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"{msg}: {e}") from e
        return unwrap_data(resp, msg)

    def _post(self, path: str, payload: Dict[str, Any], msg: str) -> Any:
        try:
            resp = self.session.post(self._url(path), json=payload)
        except requests.RequestException as e:
            raise ApiError(f"{msg}: {e}") from e
        return unwrap_data(resp, msg)

    def login(self, name: str, password: str) -> str:
        """Log in and attach the bearer token to every later request.

        Raises:
            ApiError: If the credentials are rejected or no token comes back.
        """
        data = self._post("/app/user/login", {"name": name, "password": password}, "Login failed")
        token = data.get("accessToken") if isinstance(data, dict) else None
        if not token:
            raise ApiError("Login failed: no accessToken in response")
        self.session.headers["Authorization"] = f"Bearer {token}"
        logger.info("Login successful as %s", name)
        return token

    def get_first_branch(self) -> Branch:
        """Return the first branch, creating the default one if none exists."""
        data = self._get("/app/branch", "Failed to list branches", params={"limit": 1})
        rows = rows_from_list_payload(data)
        if rows:
            return Branch.from_api(rows[0])
        logger.warning("No branch found, creating default branch %s", DEFAULT_BRANCH["code"])
        created = self._post("/app/branch", DEFAULT_BRANCH, "Failed to create branch")
        return Branch.from_api(created)

    def get_all_items(self, limit: int = ITEM_FETCH_LIMIT) -> List[CatalogItem]:
        """Fetch the item catalog with variants.

        A failed fetch is logged and yields an empty catalog, which makes
        every sales line unmatched rather than aborting the run. Rows that
        lack an id or carry unreadable numbers are skipped with a warning.
        """
        try:
            data = self._get("/master/item", "Failed to fetch items", params={"limit": limit})
        except ApiError as e:
            logger.warning("Failed to fetch all items: %s", e)
            return []

        items: List[CatalogItem] = []
        for row in rows_from_list_payload(data):
            try:
                items.append(CatalogItem.from_api(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed catalog item %r: %r", row, e)
        return items

    def create_sales(self, payload: Dict[str, Any]) -> Any:
        """Post one sales transaction."""
        return self._post("/transaction/sales", payload, "Failed to create sales")
