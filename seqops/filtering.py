from __future__ import annotations
from .types import *
from .cursor import Cursor, LazySequence, open_cursor


class _WhereCursor(Cursor[T]):
    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__()
        self._source = open_cursor(source)
        self._predicate = predicate

    def _advance(self) -> bool:
        while self._source.move_next():
            item = self._source.current
            if self._predicate(item):
                self._set_current(item)
                return True
        return False

    def _release(self) -> None:
        self._source.close()


class _SkipWhileCursor(Cursor[T]):
    """skipping -> passing; once the predicate fails, it is never consulted again"""

    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__()
        self._source = open_cursor(source)
        self._predicate = predicate
        self._skipping = True

    def _advance(self) -> bool:
        while self._source.move_next():
            item = self._source.current
            if self._skipping and self._predicate(item):
                continue
            self._skipping = False
            self._set_current(item)
            return True
        return False

    def _release(self) -> None:
        self._source.close()


class _ConcatCursor(Cursor[T]):
    def __init__(self, first: Iterable[T], second: Iterable[T]):
        super().__init__()
        self._source = open_cursor(first)
        self._next_source: Optional[Iterable[T]] = second

    def _advance(self) -> bool:
        while True:
            if self._source.move_next():
                self._set_current(self._source.current)
                return True
            if self._next_source is None:
                return False
            self._source = open_cursor(self._next_source)
            self._next_source = None

    def _release(self) -> None:
        self._next_source = None
        self._source.close()


def where(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """elements for which predicate holds, evaluated one at a time"""
    return LazySequence(lambda: _WhereCursor(source, predicate), "where")


def skip_while(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """bypass the leading run of elements satisfying predicate, then yield everything"""
    return LazySequence(lambda: _SkipWhileCursor(source, predicate), "skip_while")


def concat(first: Iterable[T], second: Iterable[T]) -> LazySequence[T]:
    """all elements of first followed by all elements of second, duplicates kept"""
    return LazySequence(lambda: _ConcatCursor(first, second), "concat")
