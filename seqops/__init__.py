"""
seqops: membership tests, deduplication, set algebra, predicate search and
equality comparison over lazily produced sequences.

functional api lives in seqops.search, seqops.setops and seqops.filtering;
Enumerable wraps the same operations in a chainable form.
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    P,
    p
)

# expose the functional api
from .search import (
    all_,
    any_,
    contains,
    count,
    element_at,
    element_at_or_default,
    first,
    first_or_default,
    last,
    last_or_default,
    single,
    single_or_default,
    sequence_equal
)
from .setops import distinct, except_, intersect, union
from .filtering import where, skip_while, concat

# expose supporting types
from .comparers import (
    EqualityComparer,
    DefaultEqualityComparer,
    KeyEqualityComparer,
    FunctionEqualityComparer,
    resolve_comparer
)
from .hashset import ComparerSet
from .cursor import Cursor, SourceCursor, LazySequence, open_cursor
from .exceptions import (
    SequenceError,
    OutOfRangeError,
    AmbiguousMatchError,
    NotFoundError,
    CursorStateError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "P",
    "p",
    "all_",
    "any_",
    "contains",
    "count",
    "element_at",
    "element_at_or_default",
    "first",
    "first_or_default",
    "last",
    "last_or_default",
    "single",
    "single_or_default",
    "sequence_equal",
    "distinct",
    "except_",
    "intersect",
    "union",
    "where",
    "skip_while",
    "concat",
    "EqualityComparer",
    "DefaultEqualityComparer",
    "KeyEqualityComparer",
    "FunctionEqualityComparer",
    "resolve_comparer",
    "ComparerSet",
    "Cursor",
    "SourceCursor",
    "LazySequence",
    "open_cursor",
    "SequenceError",
    "OutOfRangeError",
    "AmbiguousMatchError",
    "NotFoundError",
    "CursorStateError"
]
