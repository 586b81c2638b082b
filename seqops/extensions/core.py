from __future__ import annotations
import typing
from ..types import *
from .. import filtering

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(filtering.where(self, predicate))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip the leading elements while predicate is true, then take the rest"""
        from ..enumerable import Enumerable
        return Enumerable(filtering.skip_while(self, predicate))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..enumerable import Enumerable
        return Enumerable(filtering.concat(self, other))
