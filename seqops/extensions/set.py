from __future__ import annotations
import typing
from ..types import *
from ..comparers import EqualityComparer
from .. import setops

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

ComparerArg = Union[EqualityComparer[T], EqualityFunc[T], None]

class SetAccessor(Generic[T]):
    """
    set-theoretic operations: distinct, union, intersection and difference.
    all of them are lazy and preserve the order of first appearance.
    the comparer argument accepts an EqualityComparer or a plain (x, y) -> bool function.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: ComparerArg = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(setops.distinct(self._enumerable, comparer))

    def union(self, other: Iterable[T], comparer: ComparerArg = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        return Enumerable(setops.union(self._enumerable, other, comparer))

    def intersect(self, other: Iterable[T], comparer: ComparerArg = None) -> 'Enumerable[T]':
        """return the order-preserving, distinct intersection of two sequences."""
        from ..enumerable import Enumerable
        return Enumerable(setops.intersect(self._enumerable, other, comparer))

    def except_(self, other: Iterable[T], comparer: ComparerArg = None) -> 'Enumerable[T]':
        """return distinct elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        return Enumerable(setops.except_(self._enumerable, other, comparer))
