from __future__ import annotations
from abc import ABC, abstractmethod
from .types import *


class EqualityComparer(ABC, Generic[T]):
    """
    pluggable equality strategy. hash() must agree with equals():
    two elements that compare equal have to produce the same hash.
    """

    @abstractmethod
    def equals(self, x: T, y: T) -> bool:
        pass

    @abstractmethod
    def hash(self, item: T) -> int:
        pass


class DefaultEqualityComparer(EqualityComparer[T]):
    """value equality via == and the builtin hash"""

    def equals(self, x: T, y: T) -> bool:
        return x == y

    def hash(self, item: T) -> int:
        return hash(item)

    def __repr__(self) -> str:
        return "DefaultEqualityComparer()"


class KeyEqualityComparer(EqualityComparer[T]):
    """compares elements by a projected key, e.g. KeyEqualityComparer(str.lower)"""

    def __init__(self, key_selector: KeySelector[T, K]):
        self._key_selector = key_selector

    def equals(self, x: T, y: T) -> bool:
        return self._key_selector(x) == self._key_selector(y)

    def hash(self, item: T) -> int:
        return hash(self._key_selector(item))

    def __repr__(self) -> str:
        return f"KeyEqualityComparer(key_selector={self._key_selector!r})"


class FunctionEqualityComparer(EqualityComparer[T]):
    """
    wraps a caller-supplied comparison function.
    without a hash function every element lands in the same bucket, so hash-based
    operations stay correct but degrade to linear lookups.
    """

    def __init__(self, equals: EqualityFunc[T], hash_func: Optional[HashFunc[T]] = None):
        self._equals = equals
        self._hash_func = hash_func

    def equals(self, x: T, y: T) -> bool:
        return bool(self._equals(x, y))

    def hash(self, item: T) -> int:
        if self._hash_func is None: return 0
        return self._hash_func(item)

    def __repr__(self) -> str:
        return f"FunctionEqualityComparer(equals={self._equals!r}, hash_func={self._hash_func!r})"


DEFAULT_COMPARER: EqualityComparer[Any] = DefaultEqualityComparer()


def resolve_comparer(comparer: Union[EqualityComparer[T], EqualityFunc[T], None] = None) -> EqualityComparer[T]:
    """normalise the comparer argument every operation accepts"""
    if comparer is None:
        return DEFAULT_COMPARER
    if isinstance(comparer, EqualityComparer):
        return comparer
    if callable(comparer):
        return FunctionEqualityComparer(comparer)
    raise TypeError(f"expected an EqualityComparer or a callable, got {type(comparer).__name__}")
