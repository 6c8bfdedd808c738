"""
Entry store for the journal.

Holds the session's journal entries in presentation order (newest first) and
enforces one entry per calendar date.
"""

import logging
from collections.abc import Iterator
from datetime import date

from diet_journal.domain.journal import JournalEntry
from diet_journal.utils.timezone_utils import coerce_entry_date

logger = logging.getLogger(__name__)


class EntryStore:
    """
    In-memory collection of journal entries keyed by date.

    The sequence is kept sorted descending by date. Replacing an existing
    entry keeps its position, since an edit never changes the date it
    belongs to; inserting a new date re-sorts the collection.
    """

    def __init__(self, entries: list[JournalEntry] | None = None) -> None:
        """
        Initialize the store.

        Args:
            entries: Optional initial entries, upserted in order.
        """
        self._entries: list[JournalEntry] = []

        for entry in entries or []:
            self.upsert(entry)

    def _index_of(self, entry_date: date) -> int | None:
        for idx, entry in enumerate(self._entries):
            if entry.date == entry_date:
                return idx
        return None

    def upsert(self, entry: JournalEntry) -> None:
        """
        Insert an entry, or replace the entry already logged for its date.

        Args:
            entry: Entry to store.
        """
        idx = self._index_of(entry.date)

        if idx is not None:
            self._entries[idx] = entry
            logger.debug(f"Replaced entry for {entry.date} at position {idx}")
            return

        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.date, reverse=True)
        logger.debug(f"Inserted entry for {entry.date} ({len(self._entries)} entries)")

    def remove(self, entry_date: date | str) -> None:
        """
        Delete the entry for a date. Missing dates are ignored.

        Args:
            entry_date: Date key, as a date or an ISO ``YYYY-MM-DD`` string.
        """
        key = coerce_entry_date(entry_date)
        idx = self._index_of(key)

        if idx is None:
            logger.debug(f"No entry for {key}, nothing to remove")
            return

        del self._entries[idx]
        logger.debug(f"Removed entry for {key} ({len(self._entries)} entries)")

    def get(self, entry_date: date | str) -> JournalEntry | None:
        """Get the entry for a date, or None if nothing was logged that day."""
        idx = self._index_of(coerce_entry_date(entry_date))
        return None if idx is None else self._entries[idx]

    def list_entries(self) -> list[JournalEntry]:
        """
        Get all entries, newest first.

        Returns:
            A copy of the current sequence.
        """
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(list(self._entries))

    def __contains__(self, entry_date: object) -> bool:
        if not isinstance(entry_date, (date, str)):
            return False
        try:
            return self.get(entry_date) is not None
        except ValueError:
            return False
