"""Document reducer: rebuild transactions from a flat row stream.

The reducer walks a grid top to bottom with at most one open ("current")
transaction:

    NO_CURRENT      --header-->   IN_TRANSACTION (new entry)
    IN_TRANSACTION  --header-->   IN_TRANSACTION (previous entry sealed)
    IN_TRANSACTION  --item-->     item appended unless invalid
    IN_TRANSACTION  --summary-->  summary attached
    NO_CURRENT      --item/summary--> discarded
    any             --noise-->    discarded

After the last row the open entry, if any, is sealed as well. The reducer is
a pure function of the rows: no I/O, no state shared between calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, List, Optional, Protocol, Sequence, TypeVar

from pos_seed.parsing.classify import RowClassifier, RowRole
from pos_seed.parsing.grid import is_blank_row
from pos_seed.parsing.models import DocumentMeta

logger = logging.getLogger(__name__)


class _Entry(Protocol):
    items: list
    summary: object


E = TypeVar("E", bound=_Entry)
ItemT = TypeVar("ItemT")
SummaryT = TypeVar("SummaryT")


class ReducerState(str, Enum):
    NO_CURRENT = "no_current"
    IN_TRANSACTION = "in_transaction"


class DocumentReducer(Generic[E, ItemT, SummaryT]):
    """Accumulate classified rows into a sequence of transaction entries.

    Args:
        classify: Row classifier for the document kind.
        start_entry: Builds a new entry from a header row.
        parse_item: Builds an item from an item row; returns None when the
            row is structurally not an item.
        parse_summary: Builds the summary record from a summary row.
    """

    def __init__(
        self,
        classify: RowClassifier,
        start_entry: Callable[[List[str]], E],
        parse_item: Callable[[List[str]], Optional[ItemT]],
        parse_summary: Callable[[List[str]], SummaryT],
    ):
        self.classify = classify
        self.start_entry = start_entry
        self.parse_item = parse_item
        self.parse_summary = parse_summary
        self.entries: List[E] = []
        self.current: Optional[E] = None

    @property
    def state(self) -> ReducerState:
        return ReducerState.NO_CURRENT if self.current is None else ReducerState.IN_TRANSACTION

    def feed(self, row: List[str], row_index: int = -1) -> RowRole:
        """Process one row and return the role it was classified as."""
        role = self.classify(row)

        if role is RowRole.HEADER:
            if self.current is not None:
                self.entries.append(self.current)
            self.current = self.start_entry(row)
        elif role is RowRole.NOISE:
            pass
        elif self.current is None:
            logger.debug("Row %d: %s row before any header, discarded", row_index, role.value)
        elif role is RowRole.SUMMARY:
            self.current.summary = self.parse_summary(row)
        else:
            item = self.parse_item(row)
            if item is None:
                logger.debug("Row %d: item row without code or name, discarded", row_index)
            else:
                self.current.items.append(item)
        return role

    def finish(self) -> List[E]:
        """Seal the open entry, if any, and return all entries in order."""
        if self.current is not None:
            self.entries.append(self.current)
            self.current = None
        return self.entries


def reduce_rows(
    rows: Sequence[List[str]],
    classify: RowClassifier,
    start_entry: Callable[[List[str]], E],
    parse_item: Callable[[List[str]], Optional[ItemT]],
    parse_summary: Callable[[List[str]], SummaryT],
    first_row: int = 1,
) -> List[E]:
    """Reduce a grid into transaction entries.

    Args:
        rows: Grid rows. Rows before ``first_row`` are never considered
            (row 0 holds document metadata).
        classify: Row classifier for the document kind.
        start_entry: Header row -> new entry.
        parse_item: Item row -> item or None.
        parse_summary: Summary row -> summary.
        first_row: Index of the first row that may belong to a transaction.

    Returns:
        Entries in first-appearance order.
    """
    reducer: DocumentReducer = DocumentReducer(classify, start_entry, parse_item, parse_summary)
    for i in range(first_row, len(rows)):
        row = rows[i]
        if not row or is_blank_row(row):
            continue
        reducer.feed(row, i)
    entries = reducer.finish()
    logger.debug("Reduced %d rows into %d entries", len(rows), len(entries))
    return entries


def parse_meta_row(rows: Sequence[List[str]]) -> Optional[DocumentMeta]:
    """Read the optional report metadata from row 0.

    Returns:
        DocumentMeta when row 0 has any non-empty cell, else None.
    """
    if not rows:
        return None
    r0 = rows[0]
    if is_blank_row(r0):
        return None

    def cell(i: int) -> Optional[str]:
        return (r0[i] if i < len(r0) else "") or None

    return DocumentMeta(app=cell(0), report=cell(1), address=cell(2), phone=cell(3))
