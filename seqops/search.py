from __future__ import annotations
import logging
from collections.abc import Sequence as _IndexedSequence
from .types import *
from .comparers import EqualityComparer, resolve_comparer
from .cursor import open_cursor
from .exceptions import OutOfRangeError, AmbiguousMatchError, NotFoundError

logger = logging.getLogger(__name__)


def _is_indexed(source: Any) -> bool:
    # strings are indexable too, that's fine
    return isinstance(source, _IndexedSequence)


# --- quantifiers ---

def all_(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true iff predicate holds for every element. true on an empty source."""
    with open_cursor(source) as cursor:
        while cursor.move_next():
            if not predicate(cursor.current):
                return False
    return True


def any_(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true iff predicate holds for at least one element (or, without a predicate, if there is any element)"""
    with open_cursor(source) as cursor:
        while cursor.move_next():
            if predicate is None or predicate(cursor.current):
                return True
    return False


def contains(source: Iterable[T], item: T,
             comparer: Union[EqualityComparer[T], EqualityFunc[T], None] = None) -> bool:
    """linear membership scan under the given equality"""
    equality = resolve_comparer(comparer)
    with open_cursor(source) as cursor:
        while cursor.move_next():
            if equality.equals(cursor.current, item):
                return True
    return False


def count(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> int:
    """number of elements satisfying predicate; full scan"""
    total = 0
    with open_cursor(source) as cursor:
        while cursor.move_next():
            if predicate is None or predicate(cursor.current):
                total += 1
    return total


# --- positional access ---

def element_at(source: Iterable[T], index: int) -> T:
    """
    element at zero-based index.
    raises OutOfRangeError for a negative index or one past the end; never clamps.
    """
    if index < 0:
        raise OutOfRangeError(index, f"index {index} is negative")

    if _is_indexed(source):
        logger.debug(f"element_at: indexing {type(source).__name__} directly")
        if index >= len(source):
            raise OutOfRangeError(index, f"index {index} is out of range for length {len(source)}")
        return source[index]

    position = 0
    with open_cursor(source) as cursor:
        while cursor.move_next():
            if position == index:
                return cursor.current
            position += 1
    raise OutOfRangeError(index, f"index {index} is out of range for length {position}")


def element_at_or_default(source: Iterable[T], index: int, default: Optional[T] = None) -> Optional[T]:
    try: return element_at(source, index)
    except OutOfRangeError: return default


# --- single-element searches ---

def first(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """first element satisfying predicate. raises NotFoundError when nothing matches."""
    with open_cursor(source) as cursor:
        while cursor.move_next():
            item = cursor.current
            if predicate is None or predicate(item):
                return item
    if predicate is None:
        raise NotFoundError("sequence contains no elements")
    raise NotFoundError()


def first_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                     default: Optional[T] = None) -> Optional[T]:
    try: return first(source, predicate)
    except NotFoundError: return default


def last(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """
    last element satisfying predicate. indexable sources are scanned back to front;
    forward-only sources are scanned once, remembering the latest match.
    raises NotFoundError when nothing matches.
    """
    if _is_indexed(source):
        for item in reversed(source):
            if predicate is None or predicate(item):
                return item
    else:
        found = False
        result = None
        with open_cursor(source) as cursor:
            while cursor.move_next():
                item = cursor.current
                if predicate is None or predicate(item):
                    result = item
                    found = True
        if found:
            return result

    if predicate is None:
        raise NotFoundError("sequence contains no elements")
    raise NotFoundError()


def last_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                    default: Optional[T] = None) -> Optional[T]:
    try: return last(source, predicate)
    except NotFoundError: return default


def single(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """
    the only element satisfying predicate.
    raises AmbiguousMatchError as soon as a second match shows up, NotFoundError on none.
    """
    found = False
    result = None
    with open_cursor(source) as cursor:
        while cursor.move_next():
            item = cursor.current
            if predicate is not None and not predicate(item):
                continue
            if found:
                raise AmbiguousMatchError()
            result = item
            found = True

    if not found:
        raise NotFoundError("sequence contains no matching elements")
    return result


def single_or_default(source: Iterable[T], predicate: Optional[Predicate[T]] = None,
                      default: Optional[T] = None) -> Optional[T]:
    """like single, but returns default on zero matches. multiple matches still raise."""
    try: return single(source, predicate)
    except NotFoundError: return default


# --- comparison ---

def sequence_equal(source1: Iterable[T], source2: Iterable[T],
                   comparer: Union[EqualityComparer[T], EqualityFunc[T], None] = None) -> bool:
    """
    true iff both sequences have the same length and pairwise-equal elements.
    walks both in lockstep and stops at the first mismatch or length divergence.
    """
    equality = resolve_comparer(comparer)
    with open_cursor(source1) as left, open_cursor(source2) as right:
        while True:
            has_left = left.move_next()
            has_right = right.move_next()
            if not has_left and not has_right:
                return True
            if has_left != has_right:
                return False
            if not equality.equals(left.current, right.current):
                return False
