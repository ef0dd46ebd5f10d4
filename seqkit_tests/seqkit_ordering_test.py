import random
from collections import Counter
import suite
from dgen import from_schema
from seqkit import sort, sort_pred

test = suite.test
assert_that = suite.assert_that

person_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 30}),
    'score': ('pyfloat', {'min_value': 0, 'max_value': 100})
}


def is_non_decreasing(keys):
    return all(keys[i] <= keys[i + 1] for i in range(len(keys) - 1))


# --- sort ---

@test("sort orders numbers ascending")
def test_sort_numbers():
    assert_that(sort([3, 1, 4, 1, 5, 9]) == [1, 1, 3, 4, 5, 9], "ints should sort ascending")
    assert_that(sort([2.5, -1.0, 0.0]) == [-1.0, 0.0, 2.5], "floats should sort ascending")


@test("sort orders strings lexicographically")
def test_sort_strings():
    assert_that(sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"], "strings sort lexicographically")


@test("sort mutates and returns the same list")
def test_sort_in_place():
    data = [5, 3, 4]
    result = sort(data)
    assert_that(result is data, "sort should return its argument")
    assert_that(data == [3, 4, 5], "argument should be sorted in place")


@test("sort handles empty, single and mixed numeric lists")
def test_sort_edges():
    assert_that(sort([]) == [], "empty list stays empty")
    assert_that(sort([7]) == [7], "single element is sorted")
    assert_that(sort([3, 1.5, 2]) == [1.5, 2, 3], "mixed ints and floats sort by value")
    assert_that(sort([2 ** 70, -1, 0]) == [-1, 0, 2 ** 70], "big ints fall back to python sorting")


@test("sort is a permutation producing non-decreasing output")
def test_sort_permutation():
    rng = random.Random(3)
    for _ in range(30):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        before = Counter(data)
        sort(data)
        assert_that(is_non_decreasing(data), f"output should be non-decreasing: {data}")
        assert_that(Counter(data) == before, "sort should keep the same multiset")


# --- sort_pred ---

@test("sort_pred orders records by a projected key")
def test_sort_pred_by_age():
    people = [("Bob", 30), ("Alice", 25), ("Charlie", 35)]
    result = sort_pred(people, lambda p: p[1])
    assert_that(result == [("Alice", 25), ("Bob", 30), ("Charlie", 35)], f"got {result}")
    assert_that(result is people, "sort_pred should return its argument")


@test("sort_pred supports string keys")
def test_sort_pred_string_key():
    words = ["banana", "Apple", "cherry"]
    sort_pred(words, lambda w: w.lower())
    assert_that(words == ["Apple", "banana", "cherry"], f"got {words}")


@test("sort_pred calls key_func once per element")
def test_sort_pred_key_calls():
    calls = []

    def key(x):
        calls.append(x)
        return -x

    data = [1, 4, 2, 3]
    sort_pred(data, key)
    assert_that(data == [4, 3, 2, 1], f"got {data}")
    assert_that(sorted(calls) == [1, 2, 3, 4], "each element should be projected exactly once")


@test("sort_pred on generated records is a non-decreasing permutation")
def test_sort_pred_generated():
    people = from_schema(person_schema, seed=21).take(40).to.list()
    ids_before = Counter(id(p) for p in people)

    sort_pred(people, lambda p: p['age'])
    assert_that(is_non_decreasing([p['age'] for p in people]), "ages should be non-decreasing")
    assert_that(Counter(id(p) for p in people) == ids_before, "same records should remain")

    sort_pred(people, lambda p: p['score'])
    assert_that(is_non_decreasing([p['score'] for p in people]), "scores should be non-decreasing")

    sort_pred(people, lambda p: p['name'])
    assert_that(is_non_decreasing([p['name'] for p in people]), "names should be non-decreasing")


if __name__ == "__main__":
    suite.run(title="seqkit ordering test suite")
