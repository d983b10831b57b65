import suite
from lazyseq import (
    LazySequence, L, from_source, from_sequence, from_range, repeat, count, empty, generate,
    InvalidSourceError, LazySequenceError
)

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

array = [1, 2, 3]


def generator():
    yield from array


# --- construction ---

@test("wrapping a list iterates its values")
def test_new_from_list():
    result = list(LazySequence(array))
    assert_that(result == array, f"should iterate the list: {result}")


@test("wrapping a generator function iterates what it yields")
def test_new_from_generator_function():
    result = list(LazySequence(generator))
    assert_that(result == array, f"should iterate the generator: {result}")


@test("production function may return any iterable")
def test_new_from_function_returning_iterable():
    seq = LazySequence(lambda: (v * 10 for v in array))
    assert_that(seq.to_array() == [10, 20, 30], "should iterate the returned generator")
    assert_that(LazySequence(lambda: [7, 8]).to_array() == [7, 8], "should accept a returned list")


@test("wrapping a generator object iterates it once")
def test_new_from_generator_object():
    seq = LazySequence(generator())
    assert_that(seq.to_array() == array, "first pass should see every value")
    assert_that(seq.to_array() == [], "a consumed generator object cannot be replayed")


@test("strings, ranges and dicts are iterable sources")
def test_new_from_builtin_iterables():
    assert_that(LazySequence("abc").to_array() == ['a', 'b', 'c'], "should iterate characters")
    assert_that(LazySequence(range(3)).to_array() == [0, 1, 2], "should iterate range")
    assert_that(LazySequence({'x': 1, 'y': 2}).to_array() == ['x', 'y'], "should iterate dict keys")


@test("None is rejected at construction")
def test_new_rejects_none():
    with raises(InvalidSourceError) as raised:
        LazySequence(None)
    assert_that(raised.error.source is None, "error should keep the source")


@test("values that are neither iterable nor callable are rejected")
def test_new_rejects_non_iterable():
    for bad in (42, 3.5, object()):
        with raises(InvalidSourceError):
            LazySequence(bad)


@test("InvalidSourceError is a TypeError and a LazySequenceError")
def test_invalid_source_error_hierarchy():
    with raises(TypeError):
        LazySequence(42)
    with raises(LazySequenceError):
        from_source(42)


@test("construction never invokes the production function")
def test_new_is_lazy():
    calls = []

    def produce():
        calls.append('produce')
        return iter(array)

    seq = LazySequence(produce)
    repr(seq)
    assert_that(calls == [], "nothing should run before iteration")
    seq.to_array()
    assert_that(calls == ['produce'], f"one pass should invoke it once: {calls}")


@test("each iteration gets an independent cursor")
def test_independent_cursors():
    seq = LazySequence(array)
    first, second = iter(seq), iter(seq)
    assert_that(next(first) == 1 and next(first) == 2, "first cursor should advance")
    assert_that(next(second) == 1, "second cursor should start from the beginning")


@test("repr describes the source without iterating it")
def test_repr():
    assert_that(repr(LazySequence([1, 2])) == "LazySequence([1, 2])", f"unexpected repr: {LazySequence([1, 2])!r}")


# --- from_sequence ---

@test("from_sequence replays a list")
def test_from_sequence_values():
    result = LazySequence.from_sequence(array).to_array()
    assert_that(result == array, f"should replay values: {result}")


@test("from_sequence of a lazy sequence is a new sequence with the same values")
def test_from_sequence_of_sequence():
    source = LazySequence(array)
    copy = from_sequence(source)
    assert_that(copy is not source, "should be a new object")
    assert_that(copy.to_array() == array, "should replay the source")
    assert_that(from_sequence(empty()).to_array() == [], "empty should stay empty")


@test("from_sequence rejects None and non-iterables")
def test_from_sequence_rejects():
    with raises(InvalidSourceError):
        from_sequence(None)
    with raises(InvalidSourceError):
        LazySequence.from_sequence(5)


# --- factories ---

@test("from_range creates consecutive integers")
def test_from_range():
    assert_that(from_range(10, 5).to_array() == [10, 11, 12, 13, 14], "should start at 10")
    assert_that(from_range(0, 0).to_array() == [], "zero count should be empty")


@test("repeat with a count repeats a fixed number of times")
def test_repeat_counted():
    assert_that(repeat('a', 3).to_array() == ['a', 'a', 'a'], "should repeat three times")


@test("repeat without a count is endless but can be sliced")
def test_repeat_endless():
    assert_that(repeat('a').slice(0, 4).to_array() == ['a'] * 4, "bounded slice should terminate")


@test("count produces an endless progression")
def test_count():
    assert_that(count(5, 2).slice(0, 3).to_array() == [5, 7, 9], "should step by 2")
    assert_that(count().find(lambda v: v > 10) == 11, "find should short-circuit")


@test("generate calls the function on every iteration")
def test_generate():
    calls = []

    def next_value():
        calls.append(1)
        return len(calls)

    seq = generate(next_value, 3)
    assert_that(calls == [], "nothing should run before iteration")
    assert_that(seq.to_array() == [1, 2, 3], "first pass")
    assert_that(seq.to_array() == [4, 5, 6], "second pass calls the function again")


@test("empty and the L alias")
def test_empty_and_alias():
    assert_that(empty().to_array() == [], "empty should have no values")
    assert_that(isinstance(L(array), LazySequence), "L should build a lazy sequence")
    assert_that(L(array).to_array() == array, "L should wrap the values")


if __name__ == "__main__":
    suite.main(title="lazyseq construction test suite")
