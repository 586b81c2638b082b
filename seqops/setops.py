"""
hash-backed set algebra over lazy sequences.

each operation returns a LazySequence whose cursor owns its source cursor(s) and its
ComparerSet state. membership sets over a second operand are built once, on the first
advance, so combined cost stays linear in the sizes of both inputs.
"""
from __future__ import annotations
import logging
from .types import *
from .comparers import EqualityComparer, resolve_comparer
from .cursor import Cursor, LazySequence, open_cursor
from .hashset import ComparerSet

logger = logging.getLogger(__name__)

ComparerArg = Union[EqualityComparer[T], EqualityFunc[T], None]


class _DistinctCursor(Cursor[T]):
    def __init__(self, source: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__()
        self._source = open_cursor(source)
        self._seen = ComparerSet(comparer)

    def _advance(self) -> bool:
        while self._source.move_next():
            item = self._source.current
            if self._seen.add(item):
                self._set_current(item)
                return True
        return False

    def _release(self) -> None:
        self._source.close()


class _MembershipCursor(Cursor[T]):
    """
    yields first occurrences from the primary source whose membership in the
    secondary source equals `keep_members`. the secondary source is drained into a
    membership set on the first advance (pending -> streaming), never rescanned.
    """

    def __init__(self, source: Iterable[T], other: Iterable[T], comparer: EqualityComparer[T], keep_members: bool):
        super().__init__()
        self._source = open_cursor(source)
        self._other = other
        self._comparer = comparer
        self._keep_members = keep_members
        self._members: Optional[ComparerSet[T]] = None
        self._seen = ComparerSet(comparer)

    def _build_members(self) -> ComparerSet[T]:
        members = ComparerSet(self._comparer)
        with open_cursor(self._other) as other:
            while other.move_next():
                members.add(other.current)
        logger.debug(f"built membership set of {len(members)} distinct elements")
        # drop the reference so a one-shot source isn't kept alive
        self._other = None
        return members

    def _advance(self) -> bool:
        if self._members is None:
            self._members = self._build_members()
        while self._source.move_next():
            item = self._source.current
            if (item in self._members) == self._keep_members and self._seen.add(item):
                self._set_current(item)
                return True
        return False

    def _release(self) -> None:
        self._source.close()


class _UnionCursor(Cursor[T]):
    """drains source1 then source2, sharing one seen set across both"""

    def __init__(self, source1: Iterable[T], source2: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__()
        self._pending = [source2]
        self._source = open_cursor(source1)
        self._seen = ComparerSet(comparer)

    def _advance(self) -> bool:
        while True:
            while self._source.move_next():
                item = self._source.current
                if self._seen.add(item):
                    self._set_current(item)
                    return True
            if not self._pending:
                return False
            self._source.close()
            self._source = open_cursor(self._pending.pop(0))

    def _release(self) -> None:
        self._pending = []
        self._source.close()


def distinct(source: Iterable[T], comparer: ComparerArg = None) -> LazySequence[T]:
    """each element the first time it is seen, in original order"""
    equality = resolve_comparer(comparer)
    return LazySequence(lambda: _DistinctCursor(source, equality), "distinct")


def except_(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> LazySequence[T]:
    """distinct elements of source1 that do not appear in source2"""
    equality = resolve_comparer(comparer)
    return LazySequence(lambda: _MembershipCursor(source1, source2, equality, keep_members=False), "except")


def intersect(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> LazySequence[T]:
    """distinct elements of source1 that also appear in source2, in source1's order"""
    equality = resolve_comparer(comparer)
    return LazySequence(lambda: _MembershipCursor(source1, source2, equality, keep_members=True), "intersect")


def union(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> LazySequence[T]:
    """distinct elements of source1 followed by those of source2 not already emitted"""
    equality = resolve_comparer(comparer)
    return LazySequence(lambda: _UnionCursor(source1, source2, equality), "union")
