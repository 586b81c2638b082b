import suite
from seqops import SourceCursor, LazySequence, open_cursor, distinct, CursorStateError, SequenceError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("move_next walks the source and reports exhaustion")
def test_move_next_basic():
    cursor = SourceCursor([1, 2])
    assert_that(cursor.move_next() and cursor.current == 1, "first element")
    assert_that(cursor.move_next() and cursor.current == 2, "second element")
    assert_that(not cursor.move_next(), "exhausted")
    assert_that(cursor.closed, "exhaustion closes the cursor")
    assert_that(not cursor.move_next(), "stays exhausted")


@test("current is rejected before the first move and after exhaustion")
def test_current_state():
    cursor = SourceCursor([1])
    assert_raises(CursorStateError, lambda: cursor.current)
    cursor.move_next()
    cursor.move_next()
    error = assert_raises(CursorStateError, lambda: cursor.current)
    assert_that(isinstance(error, SequenceError), "cursor state errors share the library base class")


@test("close releases generator sources and runs their cleanup")
def test_close_releases_generator():
    log = []

    def source():
        try:
            yield 1
            yield 2
        finally:
            log.append('released')

    with SourceCursor(source()) as cursor:
        cursor.move_next()
    assert_that(log == ['released'], "leaving the with block should close the generator")
    assert_that(cursor.closed, "cursor is closed")


@test("close is idempotent")
def test_close_idempotent():
    cursor = SourceCursor(iter([1, 2]))
    cursor.close()
    cursor.close()
    assert_that(not cursor.move_next(), "closed cursor yields nothing")


@test("cursor is a python iterator")
def test_cursor_iterator_protocol():
    cursor = SourceCursor('abc')
    assert_that(iter(cursor) is cursor, "iter returns the cursor itself")
    assert_that(list(cursor) == ['a', 'b', 'c'], "list drains it")


@test("open_cursor reuses cursors and opens lazy sequences")
def test_open_cursor():
    cursor = SourceCursor([1])
    assert_that(open_cursor(cursor) is cursor, "an existing cursor is reused")
    lazy = distinct([1, 1, 2])
    assert_that(list(open_cursor(lazy)) == [1, 2], "lazy sequence opens a fresh cursor")


@test("lazy sequences build a fresh cursor per iteration")
def test_lazy_sequence_fresh_cursor():
    built = []

    def factory():
        built.append(1)
        return SourceCursor([7])

    lazy = LazySequence(factory, "sevens")
    assert_that(built == [], "nothing built before iteration")
    assert_that(list(lazy) == [7] and list(lazy) == [7], "two passes")
    assert_that(len(built) == 2, "one cursor per pass")
    assert_that(repr(lazy) == "LazySequence(sevens)", "repr names the operation")


@test("errors raised while advancing close the cursor and propagate")
def test_error_closes_cursor():
    def source():
        yield 1
        raise RuntimeError("broken source")

    cursor = SourceCursor(source())
    cursor.move_next()
    assert_raises(RuntimeError, cursor.move_next)
    assert_that(cursor.closed, "cursor closed after the failure")


if __name__ == "__main__":
    suite.main(title="seqops cursor test")
