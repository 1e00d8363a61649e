import string
import suite
from loqy import (
    sample, samples, shuffle, random_string, configure, get_settings,
    LOWER_CASE_LETTERS, NUMBERS, ALPHANUMERIC, L
)

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


@test("sample picks an element of the input")
def test_sample_membership():
    data = ['a', 'b', 'c']
    for _ in range(50):
        assert_that(sample(data) in data, "sample must come from the input")


@test("sample on empty input returns the empty value")
def test_sample_empty():
    assert_that(sample([]) is None, "none by default")
    assert_that(sample([], empty=0) == 0, "caller supplied empty value")


@test("sample eventually sees every element")
def test_sample_coverage():
    data = [1, 2, 3, 4]
    seen = {sample(data) for _ in range(500)}
    assert_that(seen == set(data), f"only saw {seen}")


@test("samples draws distinct positions without replacement")
def test_samples_without_replacement():
    data = list(range(20))
    for _ in range(20):
        picked = samples(data, 5)
        assert_that(len(picked) == 5, "five picked")
        assert_that(len(set(picked)) == 5, "no position chosen twice")
        assert_that(all(p in data for p in picked), "members of the input")


@test("samples caps the count at the input size")
def test_samples_cap():
    data = ['x', 'y', 'z']
    picked = samples(data, 10)
    assert_that(sorted(picked) == sorted(data), "everything returned once")
    assert_that(samples([], 3) == [], "empty input gives empty result")
    assert_that(samples(data, 0) == [], "zero count")
    with raises(ValueError):
        samples(data, -1)


@test("shuffle returns a permutation and leaves the input alone")
def test_shuffle_permutation():
    data = list(range(30))
    snapshot = list(data)
    shuffled = shuffle(data)
    assert_that(sorted(shuffled) == data, "same elements")
    assert_that(data == snapshot, "input untouched")
    assert_that(shuffle([]) == [], "empty")
    assert_that(shuffle([7]) == [7], "single element")


@test("shuffle produces different orders across calls")
def test_shuffle_varies():
    data = list(range(10))
    orders = {tuple(shuffle(data)) for _ in range(50)}
    assert_that(len(orders) > 1, "fifty shuffles of ten items should not all agree")


@test("shuffle places elements roughly uniformly")
def test_shuffle_distribution():
    data = ['a', 'b', 'c']
    first_counts = {k: 0 for k in data}
    rounds = 3000
    for _ in range(rounds):
        first_counts[shuffle(data)[0]] += 1
    for k, c in first_counts.items():
        assert_that(800 < c < 1200, f"'{k}' led {c} of {rounds} shuffles")


@test("random_string has the requested length and charset")
def test_random_string():
    result = random_string(100, LOWER_CASE_LETTERS)
    assert_that(len(result) == 100, "length 100")
    assert_that(all(c in LOWER_CASE_LETTERS for c in result), "only lowercase letters")
    digits = random_string(12, list(NUMBERS))
    assert_that(digits.isdigit() and len(digits) == 12, "charset given as a list")
    assert_that(random_string(1, 'q') == 'q', "single-character charset")


@test("random_string uses the configured default charset")
def test_random_string_default_charset():
    result = random_string(64)
    assert_that(all(c in ALPHANUMERIC for c in result), "default is alphanumeric")
    previous = get_settings().default_charset
    try:
        configure(default_charset='01')
        assert_that(set(random_string(64)) <= {'0', '1'}, "configured charset used")
    finally:
        configure(default_charset=previous)


@test("random_string rejects bad arguments")
def test_random_string_errors():
    with raises(ValueError, match="size"):
        random_string(0, string.ascii_letters)
    with raises(ValueError, match="charset"):
        random_string(5, '')


@test("sampling accessor")
def test_sampling_accessor():
    data = L([1, 2, 3, 4, 5])
    assert_that(data.rand.sample() in [1, 2, 3, 4, 5], "sample")
    picked = data.rand.samples(3).to.list()
    assert_that(len(set(picked)) == 3, "three distinct")
    assert_that(sorted(data.rand.shuffle().to.list()) == [1, 2, 3, 4, 5], "shuffle permutation")


if __name__ == "__main__":
    suite.main(title="loqy sampling test suite")
