import suite
import loqy
from dgen import from_schema
from loqy import (
    reject, filter_map, reject_map, flat_map, reduce, reduce_right, foreach, foreach_while,
    filter_reject, times, compact, replace, replace_all, L
)

test = suite.test
assert_that = suite.assert_that

product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 500}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_provider': 'choice', 'from': ['electronics', 'books', 'clothing']},
}


# map / filter / reject

@test("map passes element and index and keeps length")
def test_map_with_index():
    result = loqy.map(['a', 'b', 'c'], lambda s, i: f"{i}:{s}")
    assert_that(result == ['0:a', '1:b', '2:c'], f"got {result}")
    assert_that(loqy.map([], lambda x, i: x) == [], "empty maps to empty")


@test("filter and reject keep complementary elements in order")
def test_filter_reject_pair():
    data = [1, 2, 3, 4, 5, 6]
    evens = loqy.filter(data, lambda x, i: x % 2 == 0)
    odds = reject(data, lambda x, i: x % 2 == 0)
    assert_that(evens == [2, 4, 6], f"got {evens}")
    assert_that(odds == [1, 3, 5], f"got {odds}")
    by_position = loqy.filter(data, lambda x, i: i < 2)
    assert_that(by_position == [1, 2], "index should be usable in the predicate")


@test("filter_map keeps transformed values whose flag is true")
def test_filter_map():
    result = filter_map([1, 2, 3, 4], lambda x, i: (x * 10, x % 2 == 0))
    assert_that(result == [20, 40], f"got {result}")


@test("reject_map keeps transformed values whose flag is false")
def test_reject_map():
    result = reject_map([1, 2, 3, 4], lambda x, i: (x * 10, x % 2 == 0))
    assert_that(result == [10, 30], f"got {result}")


@test("flat_map concatenates the produced sequences in order")
def test_flat_map():
    result = flat_map([1, 2, 3], lambda x, i: [x] * x)
    assert_that(result == [1, 2, 2, 3, 3, 3], f"got {result}")
    sentences = ['hello world', 'loqy rocks']
    assert_that(flat_map(sentences, lambda s, i: s.split()) == ['hello', 'world', 'loqy', 'rocks'], "split words")


# folds

@test("reduce folds left to right")
def test_reduce():
    total = reduce([1, 2, 3, 4], lambda acc, x, i: acc + x, 0)
    assert_that(total == 10, f"got {total}")
    indexes = reduce(['a', 'b'], lambda acc, x, i: acc + [i], [])
    assert_that(indexes == [0, 1], "indexes should be forwarded")


@test("reduce_right folds right to left")
def test_reduce_right_order():
    names = ['Alice', 'Bob', 'Carol']
    left = reduce(names, lambda acc, x, i: f"{acc} {x}".strip(), '')
    right = reduce_right(names, lambda acc, x, i: f"{acc} {x}".strip(), '')
    assert_that(left == 'Alice Bob Carol', f"got {left}")
    assert_that(right == 'Carol Bob Alice', f"got {right}")
    indexes = reduce_right(names, lambda acc, x, i: acc + [i], [])
    assert_that(indexes == [2, 1, 0], "original positions are passed")


# visiting

@test("foreach visits every element once in order")
def test_foreach():
    seen = []
    result = foreach(['x', 'y', 'z'], lambda x, i: seen.append((i, x)))
    assert_that(result is None, "foreach returns nothing")
    assert_that(seen == [(0, 'x'), (1, 'y'), (2, 'z')], f"got {seen}")


@test("foreach_while stops at the first falsy return")
def test_foreach_while():
    seen = []

    def visit(x, i):
        seen.append(x)
        return x < 3

    foreach_while([1, 2, 3, 4, 5], visit)
    assert_that(seen == [1, 2, 3], f"elements after the stop must not be visited, got {seen}")


@test("filter_reject splits into kept and rejected")
def test_filter_reject():
    data = [5, 1, 8, 3, 9, 2]
    kept, rejected = filter_reject(data, lambda x, i: x > 4)
    assert_that(kept == [5, 8, 9], f"got {kept}")
    assert_that(rejected == [1, 3, 2], f"got {rejected}")
    assert_that(sorted(kept + rejected) == sorted(data), "every element lands in exactly one side")


@test("filter_reject partitions generated products completely")
def test_filter_reject_records():
    products = from_schema(product_schema, seed=11).take(40).to.list()
    cheap, pricey = filter_reject(products, lambda p, i: p['price'] < 100)
    assert_that(len(cheap) + len(pricey) == len(products), "no element lost")
    assert_that(all(p['price'] < 100 for p in cheap), "kept side matches predicate")
    assert_that(all(p['price'] >= 100 for p in pricey), "rejected side fails predicate")
    assert_that([p for p in products if p in cheap] == cheap, "relative order kept")


# supplements

@test("times builds a list from the index")
def test_times():
    assert_that(times(4, lambda i: i * i) == [0, 1, 4, 9], "squares")
    assert_that(times(0, lambda i: i) == [], "zero count")


@test("compact drops falsy values")
def test_compact():
    result = compact(['', 'foo', None, 'bar', 0, 1, False, []])
    assert_that(result == ['foo', 'bar', 1], f"got {result}")


@test("replace swaps only the first n occurrences")
def test_replace():
    data = [1, 2, 2, 3, 4, 2, 5]
    assert_that(replace(data, 2, 9, 2) == [1, 9, 9, 3, 4, 2, 5], "two replaced")
    assert_that(replace(data, 2, 9, 0) == data, "zero replaced")
    assert_that(replace_all(data, 2, 9) == [1, 9, 9, 3, 4, 9, 5], "all replaced")
    assert_that(data == [1, 2, 2, 3, 4, 2, 5], "input untouched")


# fluent api

@test("enumerable core operations are lazy and delegate to the flat functions")
def test_enumerable_core_chain():
    calls = []

    def tracked(x, i):
        calls.append(x)
        return x * 2

    chain = L([1, 2, 3, 4]).map(tracked).filter(lambda x, i: x > 4)
    assert_that(calls == [], "nothing should run before materialization")
    assert_that(chain.to.list() == [6, 8], "map then filter")
    assert_that(calls == [1, 2, 3, 4], "map ran once")
    chain.to.list()
    assert_that(calls == [1, 2, 3, 4], "result is cached")


@test("enumerable folds and visits")
def test_enumerable_terminals():
    data = L(['Alice', 'Bob', 'Carol'])
    joined = data.reduce_right(lambda acc, x, i: acc + x[0], '')
    assert_that(joined == 'CBA', f"got {joined}")
    seen = []
    returned = data.foreach(lambda x, i: seen.append(i))
    assert_that(returned is data, "foreach returns the enumerable for chaining")
    assert_that(seen == [0, 1, 2], "visited every index")
    kept, rejected = data.filter_reject(lambda x, i: len(x) > 3)
    assert_that((kept, rejected) == (['Alice', 'Carol'], ['Bob']), "split by length")
    assert_that(data.where(lambda x: x.startswith('B')).to.list() == ['Bob'], "where takes element only")


@test("transforms never mutate their input")
def test_transform_non_mutation():
    data = [[1], [2, 3], []]
    snapshot = [list(x) for x in data]
    loqy.map(data, lambda x, i: x + [i])
    flat_map(data, lambda x, i: x)
    filter_reject(data, lambda x, i: bool(x))
    compact(data)
    assert_that(data == snapshot, "input should be unchanged")


if __name__ == "__main__":
    suite.main(title="loqy transform test suite")
