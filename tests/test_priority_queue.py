"""Tests for the binary heap priority queue."""

import operator
from dataclasses import dataclass

import pytest

from graphkit.diagnostics import debug_context, is_heap
from graphkit.structures import PriorityQueue


@dataclass
class Task:
    priority: int
    name: str


class TestConstruction:
    """Tests for queue construction."""

    def test_default_construction_status(self):
        """Test that a new queue is empty."""
        pq = PriorityQueue()
        assert pq.size() == 0
        assert pq.empty()
        assert len(pq) == 0
        assert not pq

    def test_construction_predefined_container(self):
        """Test construction from existing data heapifies it."""
        data = [9, 0, 8, 1, 7, 2, 6, 3, 5, 4]
        pq = PriorityQueue(operator.lt, data)
        assert pq.size() == 10
        assert not pq.empty()
        assert pq.top() == 0
        assert is_heap(list(pq), operator.lt)

    def test_construction_copies_data(self):
        """Test that the initial container is copied, not adopted."""
        data = [3, 1, 2]
        pq = PriorityQueue(operator.lt, data)
        pq.pop()
        assert data == [3, 1, 2]


class TestPushPop:
    """Tests for push, pop and top."""

    def test_push(self):
        """Test that pushes grow the queue."""
        pq = PriorityQueue()
        pq.push(9)
        pq.push(0)
        pq.push(1)
        assert pq.size() == 3
        assert pq.top() == 0

    def test_pop_min_heap(self):
        """Test that the default queue pops in ascending order."""
        pq = PriorityQueue(operator.lt, [9, 0, 1, 8])
        assert [pq.pop() for _ in range(4)] == [0, 1, 8, 9]
        assert pq.empty()

    def test_pop_max_heap(self):
        """Test that a reversed comparator pops in descending order."""
        pq = PriorityQueue(operator.gt, [9, 0, 1, 8])

        assert pq.top() == 9
        assert pq.pop() == 9
        assert pq.size() == 3
        assert pq.pop() == 8
        assert pq.pop() == 1
        assert pq.pop() == 0
        assert pq.size() == 0

    def test_heap_sort_random(self, rng):
        """Test that popping everything yields sorted output."""
        values = rng.integers(0, 100, size=50).tolist()
        pq = PriorityQueue()
        for v in values:
            pq.push(v)
        assert [pq.pop() for _ in range(len(values))] == sorted(values)

    def test_empty_access_raises(self):
        """Test that top and pop on an empty queue raise IndexError."""
        pq = PriorityQueue()
        with pytest.raises(IndexError):
            pq.top()
        with pytest.raises(IndexError):
            pq.pop()

    def test_emplace(self):
        """Test that emplace constructs elements through element_type."""
        pq = PriorityQueue(lambda a, b: a.priority < b.priority, element_type=Task)
        pq.emplace(3, "low")
        pq.emplace(priority=1, name="high")
        assert pq.pop().name == "high"
        assert pq.pop().name == "low"

    def test_emplace_without_element_type(self):
        """Test that emplace needs an element type."""
        pq = PriorityQueue()
        with pytest.raises(TypeError):
            pq.emplace(1)

    def test_debug_mode_checks_pass(self):
        """Test that ordinary use satisfies the debug-mode invariant check."""
        with debug_context(True):
            pq = PriorityQueue(operator.lt, [5, 3, 8, 1])
            pq.push(0)
            pq.pop()
            pq.update(0, 9)
            assert pq.pop() == 3


class TestFindAndUpdate:
    """Tests for find_if and update."""

    def test_find_if(self):
        """Test that find_if returns the slot of a matching element."""
        pq = PriorityQueue(operator.gt)
        for v in (9, 0, 1, 8):
            pq.push(v)

        slots = list(pq)
        for v in (9, 0, 1, 8):
            i = pq.find_if(lambda x, v=v: x == v)
            assert slots[i] == v
        assert pq.find_if(lambda x: x == 42) is None

    def test_positional_update(self):
        """Test that update(position, value) overwrites and reheapifies."""
        pq = PriorityQueue(operator.gt)
        for v in (3, 0, 1, 2):
            pq.push(v)

        i = pq.find_if(lambda x: x == 2)
        pq.update(i, 4)

        assert pq.size() == 4
        assert [pq.pop() for _ in range(4)] == [4, 3, 1, 0]

    def test_positional_update_out_of_range(self):
        """Test that an invalid position raises IndexError."""
        pq = PriorityQueue(operator.lt, [1, 2])
        with pytest.raises(IndexError):
            pq.update(2, 0)
        with pytest.raises(IndexError):
            pq.update(-1, 0)

    def test_positional_update_requires_value(self):
        """Test that a position without a value raises and leaves the queue intact."""
        pq = PriorityQueue(operator.lt, [3, 1, 2])
        before = list(pq)

        with pytest.raises(TypeError):
            pq.update(1)

        assert list(pq) == before
        assert None not in list(pq)
        assert [pq.pop() for _ in range(3)] == [1, 2, 3]

    def test_full_update_after_external_key_change(self):
        """Test that update() restores order when external keys changed."""
        cost = {"a": 1.0, "b": 2.0, "c": 3.0}
        pq = PriorityQueue(lambda x, y: cost[x] < cost[y], ["a", "b", "c"])
        assert pq.top() == "a"

        cost["c"] = 0.5
        pq.update()

        assert [pq.pop() for _ in range(3)] == ["c", "a", "b"]

    def test_iteration_is_read_only_snapshot(self):
        """Test that iterating does not expose the backing list."""
        pq = PriorityQueue(operator.lt, [2, 1])
        items = list(pq)
        items.append(0)
        assert pq.size() == 2
