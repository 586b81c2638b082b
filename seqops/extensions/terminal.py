from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..comparers import EqualityComparer
from .. import search

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """eager operations that consume the sequence and return a value"""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- materialization ---

    def list(self) -> List[T]:
        """convert to list"""
        return [item for item in self._enumerable]

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def join(self, separator: str = ", ") -> str:
        """render elements as text joined by separator"""
        return separator.join(str(item) for item in self._enumerable)

    # --- scalar queries ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        return search.count(self._enumerable, predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        return search.any_(self._enumerable, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return search.all_(self._enumerable, predicate)

    def contains(self, item: T, comparer: Union[EqualityComparer[T], EqualityFunc[T], None] = None) -> bool:
        return search.contains(self._enumerable, item, comparer)

    def element_at(self, index: int) -> T:
        return search.element_at(self._enumerable, index)

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        return search.element_at_or_default(self._enumerable, index, default)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        return search.first(self._enumerable, predicate)

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        return search.first_or_default(self._enumerable, predicate, default)

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        return search.last(self._enumerable, predicate)

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        return search.last_or_default(self._enumerable, predicate, default)

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        return search.single(self._enumerable, predicate)

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        return search.single_or_default(self._enumerable, predicate, default)

    def sequence_equal(self, other: Iterable[T],
                       comparer: Union[EqualityComparer[T], EqualityFunc[T], None] = None) -> bool:
        """compare element-wise with another sequence"""
        return search.sequence_equal(self._enumerable, other, comparer)
