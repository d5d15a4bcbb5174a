import itertools
import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from faker import Faker
from mengi import Q, of, string, empty, from_function

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
    Person('diana', 35, 'chicago'),
    Person('eve', 28, 'la')
]

sample_numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def naturals():
    """an endless query, for checking early exits"""
    return from_function(lambda: itertools.count())


@test("list and tuple conversions")
def test_to_list_tuple():
    assert_equal(Q(sample_numbers).to.list(), sample_numbers)
    assert_equal(Q(sample_numbers).slice(8).to.tuple(), (9, 10))


@test("array conversion creates numpy array")
def test_to_array():
    result = Q(sample_numbers).filter(lambda x: x > 5).to.array()
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array([6, 7, 8, 9, 10])), f"array conversion failed: {result}")


@test("set conversion removes duplicates")
def test_to_set():
    assert_equal(of(1, 2, 2, 3, 3, 3).to.set(), {1, 2, 3})


@test("dict conversion with key and value selectors")
def test_to_dict():
    by_name = Q(sample_people).to.dict(lambda p: p.name)
    assert_equal(by_name['bob'], sample_people[1])
    ages = Q(sample_people).to.dict(lambda p: p.name, lambda p: p.age)
    assert_equal(ages['diana'], 35)


@test("pandas conversions")
def test_to_pandas():
    series = Q(sample_numbers).slice(0, 4).to.pandas()
    assert_that(isinstance(series, pd.Series), "should return a series")
    assert_equal(series.tolist(), [1, 2, 3])

    frame = Q(sample_people).filter(lambda p: p.city == 'la').to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should return a dataframe")
    assert_equal(frame.shape, (2, 3))
    assert_equal(list(frame['name']), ['bob', 'eve'])


@test("join concatenates string elements")
def test_to_join():
    assert_equal(string("fo0").to.join(), "fo0")
    assert_equal(string("abc").map(str.upper).to.join("-"), "A-B-C")


@test("count with and without predicate")
def test_count():
    assert_equal(Q(sample_numbers).to.count(), 10)
    assert_equal(Q(sample_numbers).to.count(lambda x: x % 2 == 0), 5)
    assert_equal(empty().to.count(), 0)


@test("any and all")
def test_any_all():
    assert_that(Q(sample_numbers).to.any(), "non-empty query has any")
    assert_that(not empty().to.any(), "empty query has none")
    assert_that(naturals().to.any(lambda x: x > 100), "any should stop at the first match")
    assert_that(Q(sample_numbers).to.all(lambda x: x > 0), "all positive")
    assert_that(not Q(sample_numbers).to.all(lambda x: x > 1), "not all greater than one")


@test("first stops early and errors on empty")
def test_first():
    assert_equal(naturals().to.first(), 0)
    assert_equal(naturals().filter(lambda x: x > 5).to.first(), 6)
    assert_equal(naturals().to.first(lambda x: x * x > 50), 8)
    assert_raises(ValueError, empty().to.first)
    assert_raises(ValueError, of(1, 2).to.first, lambda x: x > 5)


@test("first_or_default falls back")
def test_first_or_default():
    assert_that(empty().to.first_or_default() is None, "default should be None")
    assert_equal(of(1, 2).to.first_or_default(lambda x: x > 5, default=-1), -1)
    assert_equal(of(1, 2).to.first_or_default(lambda x: x > 1), 2)


@test("single requires exactly one element")
def test_single():
    assert_equal(of(7).to.single(), 7)
    assert_equal(Q(sample_people).to.single(lambda p: p.name == 'eve').age, 28)
    assert_raises(ValueError, empty().to.single)
    assert_raises(ValueError, of(1, 2).to.single)
    assert_raises(ValueError, Q(sample_people).to.single, lambda p: p.city == 'nyc')


@test("aggregate folds the sequence")
def test_aggregate():
    assert_equal(Q(sample_numbers).to.aggregate(lambda acc, x: acc + x), 55)
    assert_equal(of("a", "b").to.aggregate(lambda acc, x: acc + x, ">"), ">ab")
    assert_raises(ValueError, empty().to.aggregate, lambda acc, x: acc + x)


@test("terminal operations agree with generated data")
def test_terminal_generated():
    Faker.seed(11)
    fake = Faker()
    names = [fake.first_name() for _ in range(30)]
    query = Q(names).filter(lambda n: n[0] in "AEIOU")
    expected = [n for n in names if n[0] in "AEIOU"]
    assert_equal(query.to.list(), expected)
    assert_equal(query.to.count(), len(expected))
    assert_equal(query.to.set(), set(expected))


if __name__ == "__main__":
    suite.run(title="mengi terminal operations test suite")
