from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
KeySelector = Callable[[T], K]
EqualityFunc = Callable[[T, T], bool]
HashFunc = Callable[[T], int]
