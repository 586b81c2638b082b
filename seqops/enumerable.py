from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .cursor import Cursor, open_cursor

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_source(self) -> Iterable[T]:
        """get the underlying iterable"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source: Union[Iterable[T], Callable[[], Iterable[T]]]):
        """init with an iterable, or a function that returns one when called"""
        self._source = source

    def _get_source(self) -> Iterable[T]:
        """resolve the source. a callable source is invoked on every pass."""
        if callable(self._source) and not hasattr(self._source, '__iter__'):
            return self._source()
        return self._source

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    def cursor(self) -> Cursor[T]:
        """open a fresh cursor over the source"""
        return open_cursor(self._get_source())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired wrapper over python iterables."""
    def __init__(self, source: Union[Iterable[T], Callable[[], Iterable[T]]]):
        super().__init__(source)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)
