import suite
from seqops import distinct, except_, intersect, union, KeyEqualityComparer, FunctionEqualityComparer, LazySequence

test = suite.test
assert_that = suite.assert_that


def tracked(items, log):
    """generator source that records how far it was pulled and whether it was closed"""
    try:
        for item in items:
            log.append(item)
            yield item
    finally:
        log.append('closed')


case_insensitive = KeyEqualityComparer(str.lower)


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    result = list(distinct([1, 2, 1, 3, 2, 4]))
    assert_that(result == [1, 2, 3, 4], f"should preserve first occurrence order, got {result}")


@test("distinct handles empty and all-same sequences")
def test_distinct_edges():
    assert_that(list(distinct([])) == [], "distinct on empty should be empty")
    assert_that(list(distinct([5, 5, 5, 5])) == [5], "distinct should return single element")


@test("distinct keeps the first spelling under a custom comparer")
def test_distinct_comparer():
    result = list(distinct(['a', 'A', 'b', 'B', 'a'], case_insensitive))
    assert_that(result == ['a', 'b'], f"first spellings should win, got {result}")


@test("distinct works with a comparer that has no hash function")
def test_distinct_unhashable_comparer():
    near = FunctionEqualityComparer(lambda x, y: abs(x - y) < 0.5)
    result = list(distinct([1.0, 1.2, 3.0, 2.9], near))
    assert_that(result == [1.0, 3.0], f"near-equal values should collapse, got {result}")


@test("distinct handles unhashable elements through a key comparer")
def test_distinct_unhashable_elements():
    rows = [{'id': 1}, {'id': 2}, {'id': 1}]
    result = list(distinct(rows, KeyEqualityComparer(lambda r: r['id'])))
    assert_that(result == [{'id': 1}, {'id': 2}], f"dicts deduplicated by id, got {result}")


@test("distinct is lazy and emits elements as they are first seen")
def test_distinct_lazy():
    log = []
    result = distinct(tracked([1, 1, 2, 3], log))
    assert_that(isinstance(result, LazySequence), "should return a lazy sequence")
    assert_that(log == [], "nothing should be pulled before iteration")
    iterator = iter(result)
    assert_that(next(iterator) == 1, "first element is 1")
    assert_that(log == [1], f"only one element should be pulled, got {log}")
    assert_that(next(iterator) == 2, "second distinct element is 2")
    assert_that(log == [1, 1, 2], f"duplicates are pulled and dropped, got {log}")
    iterator.close()
    assert_that(log[-1] == 'closed', "closing the iterator should release the source")


@test("distinct re-scans the source on each iteration")
def test_distinct_reiterable():
    result = distinct([3, 3, 1])
    assert_that(list(result) == [3, 1], "first pass")
    assert_that(list(result) == [3, 1], "second pass re-scans from the start")


# --- except_ ---

@test("except_ returns distinct elements not in the second sequence")
def test_except_basic():
    assert_that(list(except_([1, 2, 3, 4], [2, 4])) == [1, 3], "should drop 2 and 4")
    assert_that(list(except_([1, 1, 2, 3], [2])) == [1, 3], "should deduplicate the first sequence")


@test("except_ with empty sequences")
def test_except_empty():
    assert_that(list(except_([1, 2], [])) == [1, 2], "except empty should return original")
    assert_that(list(except_([], [1, 2])) == [], "empty except anything should be empty")


@test("except_ uses the comparer for both membership and deduplication")
def test_except_comparer():
    result = list(except_(['a', 'B', 'A', 'c'], ['b'], case_insensitive))
    assert_that(result == ['a', 'c'], f"B is excluded and A duplicates a, got {result}")


@test("except_ drains the second sequence exactly once")
def test_except_second_source_scanned_once():
    other_log = []
    result = except_([1, 2, 3, 4], tracked([2, 4], other_log))
    assert_that(other_log == [], "second sequence is not read before iteration")
    assert_that(list(result) == [1, 3], "difference")
    assert_that(other_log == [2, 4, 'closed'], f"second sequence should be read once, got {other_log}")


# --- intersect ---

@test("intersect returns distinct common elements in first order")
def test_intersect_basic():
    result = list(intersect([1, 2, 2, 3], [2, 3, 3, 4]))
    assert_that(result == [2, 3], f"should be [2, 3], got {result}")


@test("intersect preserves first sequence order")
def test_intersect_order():
    result = list(intersect([4, 2, 3, 1], [1, 2, 3, 4]))
    assert_that(result == [4, 2, 3, 1], "should follow the first sequence")


@test("intersect of disjoint sequences is empty")
def test_intersect_disjoint():
    assert_that(list(intersect([1, 2], [3, 4])) == [], "no common elements")


@test("intersect with a custom comparer")
def test_intersect_comparer():
    result = list(intersect(['Apple', 'pear', 'APPLE'], ['apple'], case_insensitive))
    assert_that(result == ['Apple'], f"should keep the first spelling only, got {result}")


# --- union ---

@test("union combines sequences removing duplicates")
def test_union_basic():
    assert_that(list(union([1, 2], [2, 3, 4])) == [1, 2, 3, 4], "union of overlapping sequences")
    assert_that(list(union([3, 1, 3, 2], [2, 4, 1, 4])) == [3, 1, 2, 4], "order of first appearance")


@test("union with empty sequences")
def test_union_empty():
    assert_that(list(union([1, 2], [])) == [1, 2], "union with empty should return original")
    assert_that(list(union([], [1, 2, 1])) == [1, 2], "empty union other should deduplicate other")


@test("union with a custom comparer keeps the first sequence's spelling")
def test_union_comparer():
    result = list(union(['a', 'B'], ['b', 'A', 'c'], case_insensitive))
    assert_that(result == ['a', 'B', 'c'], f"got {result}")


@test("union is lazy across both sources")
def test_union_lazy():
    left, right = [], []
    iterator = iter(union(tracked([1, 2], left), tracked([2, 3, 4], right)))
    assert_that([next(iterator) for _ in range(3)] == [1, 2, 3], "first three elements")
    assert_that(left == [1, 2, 'closed'], f"first source exhausted and closed, got {left}")
    assert_that(right == [2, 3], f"second source pulled only as needed, got {right}")
    iterator.close()
    assert_that(right == [2, 3, 'closed'], "closing releases the second source")


# --- composition ---

@test("set operations compose through piping")
def test_chained_operations():
    result = list(intersect(union([1, 2, 3, 4, 5], [6, 7, 1]), [1, 2, 6, 8, 9]))
    assert_that(result == [1, 2, 6], f"got {result}")


if __name__ == "__main__":
    suite.main(title="seqops set operations test")
