"""Tests for CliqueCover/graph/vertex_set.py"""

import pytest

from CliqueCover.graph.vertex_set import AllocationError, VertexSet


class TestVertexSet:
    def test_create_empty(self):
        s = VertexSet(3)
        assert len(s) == 0
        assert s.size == 0
        assert s.capacity == 3

    def test_add_keeps_insertion_order(self):
        s = VertexSet(4)
        for v in (3, 1, 2):
            s.add(v)
        assert s.to_list() == [3, 1, 2]
        assert s[0] == 3

    def test_add_beyond_capacity_is_ignored(self):
        s = VertexSet(2)
        s.add(0)
        s.add(1)
        s.add(2)
        assert s.to_list() == [0, 1]
        assert s.size == s.capacity

    def test_zero_capacity(self):
        s = VertexSet(0)
        s.add(5)
        assert len(s) == 0

    def test_duplicates_are_not_checked(self):
        s = VertexSet(3)
        s.add(1)
        s.add(1)
        assert s.to_list() == [1, 1]

    def test_remove_last(self):
        s = VertexSet.from_vertices([4, 5, 6])
        s.remove_last()
        assert s.to_list() == [4, 5]

    def test_remove_last_on_empty_is_noop(self):
        s = VertexSet(1)
        s.remove_last()
        assert len(s) == 0

    def test_discard_keeps_order(self):
        s = VertexSet.from_vertices([1, 2, 3, 2])
        s.discard(2)
        assert s.to_list() == [1, 3, 2]
        s.discard(9)
        assert s.to_list() == [1, 3, 2]

    def test_copy_is_independent(self):
        s = VertexSet(5)
        s.add(0)
        s.add(1)
        c = s.copy()
        s.add(2)
        assert c.to_list() == [0, 1]
        assert c.capacity == 2

    def test_destroy(self):
        s = VertexSet.from_vertices([1, 2])
        s.destroy()
        assert len(s) == 0
        assert s.capacity == 0
        s.add(3)
        assert len(s) == 0

    def test_context_manager_destroys(self):
        with VertexSet(2) as s:
            s.add(1)
            assert 1 in s
        assert s.capacity == 0

    def test_equality(self):
        assert VertexSet.from_vertices([1, 2]) == VertexSet.from_vertices([1, 2], capacity=5)
        assert VertexSet.from_vertices([1, 2]) != VertexSet.from_vertices([2, 1])

    @pytest.mark.parametrize("capacity", [-1, 2.5, "3", None])
    def test_bad_capacity_raises(self, capacity):
        with pytest.raises(AllocationError):
            VertexSet(capacity)

    def test_allocation_error_is_memory_error(self):
        assert issubclass(AllocationError, MemoryError)
