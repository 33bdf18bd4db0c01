import suite
from dgen import from_schema
from eachable import E, Enumerable, DeferredEnumerator, from_range, from_mapping, empty, generate, STOP

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- helpers ---

numbers = E([1, 2, 3, 4, 5, 0])
ten = from_range(1, 10)


def tracked(data):
    """an enumerable over data plus the list of elements it has actually produced"""
    produced = []
    def steps():
        for item in data:
            produced.append(item)
            yield (item,)
    return Enumerable(steps), produced


# --- drop ---

@test("drop skips the first n elements")
def test_drop_basic():
    assert_that(numbers.drop(3) == [4, 5, 0], "should keep everything after the third element")
    assert_that(numbers.drop(0) == [1, 2, 3, 4, 5, 0], "dropping zero keeps everything")
    assert_that(numbers.drop(10) == [], "dropping more than the size leaves nothing")


@test("drop rejects a negative size")
def test_drop_negative():
    assert_raises(ValueError, numbers.drop, -1, match="attempt to drop negative size")


@test("drop coerces its size to an integer")
def test_drop_coercion():
    assert_that(numbers.drop(2.9) == [3, 4, 5, 0], "a float size should truncate")
    assert_raises(TypeError, numbers.drop, "2")
    assert_raises(TypeError, numbers.drop, None)


# --- take ---

@test("take returns the first n elements")
def test_take_basic():
    assert_that(numbers.take(3) == [1, 2, 3], "should take the first three")
    assert_that(numbers.take(0) == [], "taking zero returns an empty list")
    assert_that(numbers.take(100) == [1, 2, 3, 4, 5, 0], "taking more than the size returns everything")


@test("take rejects a negative size")
def test_take_negative():
    assert_raises(ValueError, numbers.take, -3, match="attempt to take negative size")


@test("take stops the source once it has enough")
def test_take_early_termination():
    seq, produced = tracked([10, 20, 30, 40, 50])
    assert_that(seq.take(2) == [10, 20], "should take two")
    assert_that(produced == [10, 20], "the source must not produce a third element")

    seq, produced = tracked([10, 20])
    seq.take(0)
    assert_that(produced == [], "a zero count must not touch the source")


@test("take bounds an unbounded source")
def test_take_unbounded():
    counter = iter(range(1000000))
    naturals = generate(lambda: next(counter))
    assert_that(naturals.take(5) == [0, 1, 2, 3, 4], "should take the first five naturals")


@test("take and drop split a sequence at n")
def test_take_drop_reconstruct():
    data = [5, 3, 8, 1, 9, 2]
    seq = E(data)
    for n in range(0, 9):
        taken = seq.take(n)
        assert_that(len(taken) == min(n, len(data)), f"take({n}) length is min(n, size)")
        assert_that(taken + seq.drop(n) == data, f"take({n}) + drop({n}) rebuilds the sequence")


@test("take over generated records returns plain records")
def test_take_generated():
    people = from_schema({'name': 'word', 'age': ('pyint', {'min_value': 18, 'max_value': 65})}, seed=7).take(12)
    assert_that(len(people) == 12, "should generate exactly twelve records")
    assert_that(all(18 <= p['age'] <= 65 for p in people), "ages should respect the schema")


# --- first ---

@test("first without arguments returns one element or None")
def test_first_single():
    assert_that(numbers.first() == 1, "should return the first element")
    assert_that(empty().first() is None, "an empty sequence has no first element")

    seq, produced = tracked([7, 8, 9])
    seq.first()
    assert_that(produced == [7], "first() must stop after one element")


@test("first(n) behaves like take(n)")
def test_first_count():
    assert_that(numbers.first(2) == [1, 2], "should return a list of two")
    assert_that(numbers.first(0) == [], "a zero count returns an empty list")
    assert_that(empty().first(3) == [], "an empty sequence returns an empty list")
    assert_raises(ValueError, numbers.first, -1, match="negative size")


@test("first rejects more than one argument")
def test_first_arity():
    assert_raises(TypeError, numbers.first, 1, 2, match="wrong number of arguments (given 2, expected 0..1)")


@test("first on a mapping returns a key/value pair")
def test_first_mapping():
    assert_that(from_mapping({'a': 1, 'b': 2}).first() == ('a', 1), "multi-value steps become tuples")


# --- drop_while / take_while ---

@test("drop_while drops up to the first rejected element")
def test_drop_while_basic():
    assert_that(numbers.drop_while(lambda i: i < 3) == [3, 4, 5, 0], "0 at the end is kept")
    assert_that(numbers.drop_while(lambda i: True) == [], "dropping everything leaves nothing")
    assert_that(numbers.drop_while(lambda i: None) == [1, 2, 3, 4, 5, 0], "None is falsy")


@test("drop_while stops evaluating the predicate once it flips")
def test_drop_while_lazy_predicate():
    calls = []
    def predicate(x):
        calls.append(x)
        return x < 3
    E([1, 2, 3, 1, 2]).drop_while(predicate)
    assert_that(calls == [1, 2, 3], "predicate should only be called until it first fails")


@test("take_while collects until the predicate fails and stops there")
def test_take_while_basic():
    assert_that(numbers.take_while(lambda i: i < 3) == [1, 2], "should take 1 and 2")
    assert_that(numbers.take_while(lambda i: i) == [1, 2, 3, 4, 5, 0], "0 is truthy for take_while")

    seq, produced = tracked([1, 2, 3, 4, 5])
    seq.take_while(lambda i: i < 3)
    assert_that(produced == [1, 2, 3], "the source must stop at the rejected element")


@test("take_while and drop_while without a predicate are deferred")
def test_while_deferred():
    deferred = numbers.take_while()
    assert_that(isinstance(deferred, DeferredEnumerator), "should return a deferred enumerator")
    assert_that(deferred.method == 'take_while' and deferred.args == (), "should record method and no args")
    assert_that(deferred.realize(lambda i: i < 4) == [1, 2, 3], "realizing should run take_while")
    assert_that(numbers.drop_while().realize(lambda i: i < 4) == [4, 5, 0], "realizing should run drop_while")


@test("take_while and drop_while stop when their predicate answers STOP")
def test_while_stop():
    assert_that(numbers.take_while().take(1) == [1], "take ends take_while after one element")
    assert_that(numbers.drop_while().first() == 1, "first ends drop_while after one element")
    seq, produced = tracked([1, 2, 3, 4])
    kept = seq.drop_while(lambda i: STOP if i == 2 else True)
    assert_that(kept == [] and produced == [1, 2], "nothing after the stop is produced")


# --- each_cons ---

@test("each_cons yields every window of n consecutive elements")
def test_each_cons_windows():
    windows = []
    result = ten.each_cons(3, windows.append)
    assert_that(result is None, "each_cons yields no value itself")
    assert_that(len(windows) == 8, "ten elements have eight windows of three")
    assert_that(windows[0] == [1, 2, 3] and windows[-1] == [8, 9, 10], "windows should slide in order")
    assert_that(all(len(w) == 3 for w in windows), "every window has exactly three elements")


@test("each_cons hands out independent copies of the window")
def test_each_cons_snapshots():
    windows = []
    E([1, 2, 3]).each_cons(2, windows.append)
    windows[0].append(99)
    assert_that(windows == [[1, 2, 99], [2, 3]], "mutating one window must not affect the next")


@test("each_cons with a window larger than the sequence yields nothing")
def test_each_cons_too_large():
    windows = []
    E([1, 2]).each_cons(3, windows.append)
    assert_that(windows == [], "no full window exists")


@test("each_cons rejects non-positive sizes")
def test_each_cons_invalid():
    assert_raises(ValueError, ten.each_cons, 0, print, match="invalid size")
    assert_raises(ValueError, ten.each_cons, -2, match="invalid size")


@test("each_cons without an action is deferred and enumerable")
def test_each_cons_deferred():
    deferred = ten.each_cons(4)
    assert_that(deferred.args == (4,), "the deferred enumerator carries n")
    assert_that(deferred.first() == [1, 2, 3, 4], "the first window can be read from it")
    assert_that(len(deferred.to_a()) == 7, "ten elements have seven windows of four")


# --- each_slice ---

@test("each_slice yields full chunks and a trailing partial chunk")
def test_each_slice_chunks():
    slices = []
    result = ten.each_slice(3, slices.append)
    assert_that(result is None, "each_slice yields no value itself")
    assert_that(slices == [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10]], "the last slice holds the remainder")


@test("each_slice on an exact multiple has no partial chunk")
def test_each_slice_exact():
    assert_that(from_range(1, 6).each_slice(2).to_a() == [[1, 2], [3, 4], [5, 6]], "three full pairs")
    assert_that(empty().each_slice(2).to_a() == [], "an empty sequence has no slices")


@test("each_slice rejects non-positive sizes")
def test_each_slice_invalid():
    assert_raises(ValueError, ten.each_slice, 0, match="invalid slice size")


@test("each_slice stops when the action returns STOP")
def test_each_slice_stop():
    slices = []
    def action(chunk):
        slices.append(chunk)
        return STOP
    ten.each_slice(4, action)
    assert_that(slices == [[1, 2, 3, 4]], "no further chunk, not even the trailing one")


if __name__ == "__main__":
    suite.main(title="eachable windowing & slicing test suite")
