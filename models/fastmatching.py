from threading import Lock
from typing import Protocol

from config import config
from logger import debug, warning
from models.entries import Entry, SuffixRecord
from utils.normalize import InvalidEncoding, normalize


class SubstringMatcher(Protocol):
    def register(self, key: str | bytes, value: int) -> bool: ...
    def retrieve(self, query: str | bytes) -> list[int]: ...
    def clear(self) -> None: ...


class FastMatching:
    """
    Case-insensitive "contains" index over registered (key, value) pairs.

    Every key is expanded into all of its suffixes, the suffixes are kept in one
    sorted search list, and a query matches the contiguous run of suffixes it is
    a prefix of. The search list is rebuilt lazily, on the first query after the
    entries change.
    """

    def __init__(self) -> None:
        self.entries: list[Entry] = []
        self.search_list: list[SuffixRecord] = []
        self.dirty = True
        self.lock = Lock()

    def __len__(self) -> int:
        return len(self.entries)

    def register(self, key: str | bytes, value: int) -> bool:
        try:
            entry = Entry(key=normalize(key), value=value)
        except InvalidEncoding as e:
            warning(f'Rejected key for value {value}: {e}')
            return False
        with self.lock:
            self.entries.append(entry)
            self.dirty = True
        return True

    def clear(self) -> None:
        with self.lock:
            self.entries.clear()
            self.dirty = True

    def retrieve(self, query: str | bytes) -> list[int]:
        try:
            target = normalize(query)
        except InvalidEncoding as e:
            warning(f'Rejected query: {e}')
            return []
        with self.lock:
            if self.dirty:
                self._reindex()
            start, end = self._lower_bound(target), self._upper_bound(target)
            return [value for _, value in self.search_list[start:end]]

    def dump_search_list(self) -> list[str]:
        with self.lock:
            if self.dirty:
                self._reindex()
            return self._dump()

    def rank(self, pos: int, target: str) -> int:
        """
        Compare the record at `pos` against `target`: 0 if `target` is a prefix
        of its suffix, -1 if it sorts before every such record, 1 after.
        Positions off either end of the search list rank -1 and 1 respectively.
        """
        if pos < 0:
            return -1
        if pos >= len(self.search_list):
            return 1
        head = self.search_list[pos][0][:len(target)]
        # A suffix shorter than target that agrees with it is still "before"
        if head < target:
            return -1
        if head > target:
            return 1
        return 0

    def _lower_bound(self, target: str) -> int:
        lo, hi = 0, len(self.search_list)
        while lo < hi:
            mid = (lo + hi) >> 1
            if self.rank(mid, target) < 0:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _upper_bound(self, target: str) -> int:
        lo, hi = 0, len(self.search_list)
        while lo < hi:
            mid = (lo + hi) >> 1
            if self.rank(mid, target) <= 0:
                lo = mid + 1
            else:
                hi = mid
        return lo

    # Caller holds the lock
    def _reindex(self) -> None:
        search_list = [record for entry in self.entries for record in entry.suffixes()]
        # Stable, so equal suffixes keep registration order
        search_list.sort(key=lambda record: record[0])
        self.search_list = search_list
        self.dirty = False
        debug(f'Reindexed {len(self.entries)} entries into {len(search_list)} suffixes')
        if config['dumpSearchListOnRebuild']:
            self._dump()

    def _dump(self) -> list[str]:
        lines = [f'Size of Search List: {len(self.search_list)}']
        lines += [f'Key={suffix!r}, Value={value}' for suffix, value in self.search_list]
        for line in lines:
            debug(line)
        return lines
