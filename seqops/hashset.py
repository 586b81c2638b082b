from __future__ import annotations
from .types import *
from .comparers import EqualityComparer, resolve_comparer


class ComparerSet(Generic[T]):
    """
    hash-bucketed membership set bound to a single equality comparer.
    every insert and lookup goes through the comparer given at construction.
    iteration yields elements in insertion order.
    """

    def __init__(self, comparer: Optional[EqualityComparer[T]] = None, items: Optional[Iterable[T]] = None):
        self._comparer = resolve_comparer(comparer)
        self._buckets: Dict[int, List[T]] = {}
        self._order: List[T] = []
        if items is not None:
            for item in items:
                self.add(item)

    @property
    def comparer(self) -> EqualityComparer[T]:
        return self._comparer

    def _find(self, bucket: List[T], item: T) -> bool:
        equals = self._comparer.equals
        for existing in bucket:
            if equals(existing, item):
                return True
        return False

    def add(self, item: T) -> bool:
        """insert item; returns False if an equal element was already present"""
        bucket = self._buckets.setdefault(self._comparer.hash(item), [])
        if self._find(bucket, item):
            return False
        bucket.append(item)
        self._order.append(item)
        return True

    def __contains__(self, item: T) -> bool:
        bucket = self._buckets.get(self._comparer.hash(item))
        return bucket is not None and self._find(bucket, item)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __repr__(self) -> str:
        return f"ComparerSet(size={len(self)}, comparer={self._comparer!r})"
