from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from .types import *
from .exceptions import CursorStateError

logger = logging.getLogger(__name__)


class Cursor(ABC, Generic[T]):
    """
    explicit iteration handle: move_next() advances and reports whether an element
    is available, current reads it, close() releases whatever the cursor holds.
    a cursor closes itself once exhausted. it also speaks the python iterator protocol.
    """

    def __init__(self):
        self._current: Optional[T] = None
        self._has_current = False
        self._closed = False

    @abstractmethod
    def _advance(self) -> bool:
        """produce the next element through self._set_current; return False when exhausted"""
        pass

    def _release(self) -> None:
        """release held resources. called exactly once."""
        pass

    def _set_current(self, value: T) -> None:
        self._current = value
        self._has_current = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def current(self) -> T:
        if not self._has_current:
            raise CursorStateError("cursor is not positioned on an element")
        return self._current

    def move_next(self) -> bool:
        if self._closed:
            return False
        self._has_current = False
        try:
            advanced = self._advance()
        except BaseException:
            self.close()
            raise
        if not advanced:
            self.close()
        return advanced

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._has_current = False
        self._current = None
        self._release()

    # --- python protocols ---

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self.move_next():
            return self._current
        raise StopIteration

    def __enter__(self) -> 'Cursor[T]':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class SourceCursor(Cursor[T]):
    """cursor over any python iterable; closes the underlying iterator when released"""

    def __init__(self, source: Iterable[T]):
        super().__init__()
        self._iterator: Optional[Iterator[T]] = iter(source)

    def _advance(self) -> bool:
        try:
            self._set_current(next(self._iterator))
            return True
        except StopIteration:
            return False

    def _release(self) -> None:
        iterator, self._iterator = self._iterator, None
        close = getattr(iterator, 'close', None)
        if close is not None:
            logger.debug(f"closing source iterator {type(iterator).__name__}")
            close()


def open_cursor(source: Iterable[T]) -> Cursor[T]:
    """open a cursor over source, reusing it if it already is one"""
    if isinstance(source, Cursor):
        return source
    if isinstance(source, LazySequence):
        return source.cursor()
    return SourceCursor(source)


class LazySequence(Generic[T]):
    """
    re-iterable result of a lazy operation. every iteration builds a fresh cursor,
    so the sources are scanned again from the start.
    """

    def __init__(self, cursor_factory: Callable[[], Cursor[T]], name: str = "sequence"):
        self._cursor_factory = cursor_factory
        self._name = name

    def cursor(self) -> Cursor[T]:
        return self._cursor_factory()

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    def __repr__(self) -> str:
        return f"LazySequence({self._name})"
