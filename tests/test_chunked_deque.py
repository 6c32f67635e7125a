import random
from dataclasses import dataclass

import pytest

from coursework.chunked_deque import Deque


@dataclass
class S:
    x: int = 0
    y: float = 0.0


def test_fill_copy_and_at():
    d = Deque(10, 3)
    d[3] = 5
    d[7] = 8
    d[9] = 10
    dd = d.copy()
    d[1] = 2
    d[2] = 1
    with pytest.raises(IndexError):
        d.at(10)
    assert "".join(str(x) for x in dd) == "33353338310"
    assert d.at(1) == 2


def test_push_and_pop_both_ends():
    d = Deque(1, 0)
    for i in range(8):
        d.push_back(i)
        d.push_front(i)
    for _ in range(12):
        d.pop_front()
    d.pop_back()
    assert len(d) == 4
    assert "".join(str(x) for x in d) == "3456"


def test_iterators_over_large_deque():
    d = Deque()
    for i in range(1000):
        for j in range(1000):
            if j % 3 == 2:
                d.pop_back()
            else:
                d.push_front(i * j)
    assert len(d) == 334_000

    left = d.begin() + 100_000
    right = d.end() - 233_990
    while d.begin() != left:
        d.pop_front()
    while d.end() != right:
        d.pop_back()
    assert len(d) == 10
    assert right - left == 10

    it = left
    while it != right:
        it.value += 1
        it += 1
    parts = []
    it = right - 1
    while it >= left:
        parts.append(str(it.value))
        it -= 1
    assert "".join(parts) == "51001518515355154401561015695158651595016120162051"


def test_erase_insert_and_copy_of_structs():
    d = Deque(5, S(1, 2.0))
    assert len(d) == 5
    it = d.begin() + 2
    cit = d.end() - 3
    it.value.x = 5
    assert cit.value.x == 5

    d.erase(d.begin() + 1)
    d.erase(d.begin() + 3)
    assert len(d) == 3

    dd = d.copy()
    dd.pop_back()
    dd.insert(dd.begin(), S(3, 4.0))
    dd.insert(dd.begin() + 2, S(4, 5.0))
    assert "".join(str(s.x) for s in dd) == "3145"
    assert "".join(str(s.x) for s in d) == "151"


def test_iterator_values_survive_growth():
    d = Deque()
    d.push_back(1)
    d.push_front(2)
    left_it = d.begin()
    right_it = d.end() - 1
    d.push_back(3)
    d.push_front(4)
    left = d.begin().value
    right = (d.end() - 1).value
    for i in range(10_000):
        d.push_back(i)
    for i in range(20_000):
        d.push_front(i)
    result = f"{left}{right}{left_it.value}{right_it.value}"
    assert result == "4321"


def test_pop_front_many():
    d = Deque()
    for i in range(1500):
        d.push_back(i)
    assert len(d) == 1500
    for _ in range(1300):
        d.pop_front()
    assert len(d) == 200
    assert d[99] == 1399
    d[100] = 0
    assert d[100] == 0


def test_default_and_empty_copy():
    assert len(Deque()) == 0
    assert len(Deque().copy()) == 0


def test_with_size():
    d = Deque(17, 14)
    assert len(d) == 17
    assert all(item == 14 for item in d)
    assert d.end() - d.begin() == 17


def test_assignment_by_copy():
    first = Deque(10, 10)
    second = Deque(9, 9)
    first = second.copy()
    assert len(first) == len(second) == 9
    assert first == second
    first[0] = 1
    assert second[0] == 9


def test_subscript_and_at_bounds():
    d = Deque(1300, 43)
    assert d[0] == d[1280] == 43
    assert d.at(0) == d[1280]
    with pytest.raises(IndexError):
        d.at(-1)
    with pytest.raises(IndexError):
        d.at(1300)
    with pytest.raises(IndexError):
        d[1300]
    assert d[-1] == 43


def test_iterator_arithmetic():
    empty = Deque()
    assert empty.end() - empty.begin() == 0
    assert empty.begin() + 0 == empty.end()
    assert empty.end() - 0 == empty.begin()
    assert empty.rend() - empty.rbegin() == 0
    assert empty.rbegin() + 0 == empty.rend()

    one = Deque(1, 0)
    assert one.end() - 1 == one.begin()

    d = Deque(1000, 3)
    assert d.end() - d.begin() == len(d)
    assert d.begin() + len(d) == d.end()
    assert d.end() - len(d) == d.begin()


def test_iterator_comparison():
    d = Deque(1000, 3)
    assert d.end() > d.begin()
    assert d.rend() > d.rbegin()
    assert d.begin() <= d.begin()
    assert not d.begin() < d.begin()


def test_iterators_with_algorithms():
    d = Deque(1000, 3)
    it = d.begin()
    for value in range(13, 1013):
        it.value = value
        it += 1

    values = list(d)
    random.Random(31415).shuffle(values)
    for index, value in enumerate(values):
        d[index] = value

    tail = sorted((d.rbegin() + k).value for k in range(500))
    for k, value in enumerate(tail):
        (d.rbegin() + k).value = value

    reversed_values = list(reversed(d))
    for index, value in enumerate(reversed_values):
        d[index] = value

    head = [d[i] for i in range(500)]
    assert head == sorted(head)
    assert sorted(d) == list(range(13, 1013))


def test_push_and_pop_keep_iterators_valid():
    d = Deque(10000, 1)
    start_size = len(d)
    middle = d.begin() + start_size // 2
    begin = d.begin()
    end = d.rbegin()
    middle2 = middle + 2000

    for _ in range(400):
        d.pop_back()
    assert begin.value == 1
    assert middle.value == 1
    assert middle2.value == 1

    end = d.rbegin()
    for _ in range(400):
        d.pop_front()
    assert end.value == 1
    assert middle.value == 1
    assert middle2.value == 1

    for _ in range(4590):
        d.pop_front()
        d.pop_back()
    assert len(d) == 20
    assert middle.value == 1
    assert all(item == 1 for item in d)

    begin = d.begin()
    end = d.rbegin()
    for _ in range(5500):
        d.push_back(2)
        d.push_front(2)
    assert begin.value == 1
    assert end.value == 1
    assert d.begin().value == 2
    assert len(d) == 5500 * 2 + 20
    assert list(d).count(1) == 20
    assert list(d).count(2) == 11000


def test_insert_and_erase():
    d = Deque(10000, 1)
    start_size = len(d)
    d.insert(d.begin() + start_size // 2, 2)
    assert len(d) == start_size + 1
    d.erase(d.begin() + start_size // 2 - 1)
    assert len(d) == start_size
    assert list(d).count(1) == start_size - 1
    assert list(d).count(2) == 1

    copy = Deque()
    for item in d:
        copy.insert(copy.end(), item)
    assert len(copy) == len(d)
    assert copy == d


def test_insert_and_erase_by_index():
    d = Deque()
    for value in "abc":
        d.push_back(value)
    d.insert(1, "x")
    assert list(d) == ["a", "x", "b", "c"]
    d.erase(0)
    assert list(d) == ["x", "b", "c"]
    with pytest.raises(IndexError):
        d.erase(3)
    with pytest.raises(IndexError):
        d.insert(5, "y")


def test_pop_on_empty_is_noop_and_reusable():
    d = Deque()
    d.pop_back()
    d.pop_front()
    assert len(d) == 0
    d.push_front("a")
    d.push_back("b")
    assert list(d) == ["a", "b"]
    assert list(reversed(d)) == ["b", "a"]


def test_erase_on_empty_raises():
    with pytest.raises(IndexError):
        Deque().erase(0)


def test_reverse_iterator_walks_backwards():
    d = Deque()
    for value in range(5):
        d.push_back(value)
    collected = []
    it = d.rbegin()
    while it != d.rend():
        collected.append(it.value)
        it += 1
    assert collected == list(reversed(d))
    assert collected == [4, 3, 2, 1, 0]


def test_iterators_hash_by_position():
    d = Deque(3, 0)
    positions = {d.begin(), d.end() - 3, d.begin() + 1}
    assert len(positions) == 2
    with pytest.raises(TypeError):
        d.begin() - d.rbegin()