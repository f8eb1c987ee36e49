"""Tests for the adjacency list backend."""

import copy

import pytest

from graphkit.graphs import Edge, EdgeType, SparseGraph


class TestSparseConstruction:
    """Tests for SparseGraph construction."""

    def test_default_construction_status(self):
        """Test that a new graph has its size and no edges."""
        g = SparseGraph(4)
        assert g.size() == 4
        assert g.count_edges() == 0

    def test_construction_with_edges(self):
        """Test that seed edges are added."""
        g = SparseGraph(4, [(0, 1), (0, 2), (1, 3)])
        assert g.size() == 4
        assert g.count_edges() == 3

    def test_non_positive_size_rejected(self):
        """Test that the vertex count must be positive."""
        with pytest.raises(ValueError):
            SparseGraph(0)

    def test_vertices(self):
        """Test the ascending vertex list."""
        assert SparseGraph(4).vertices() == [0, 1, 2, 3]


class TestSparseEdges:
    """Tests for edge insertion and removal."""

    def test_add_edges(self):
        """Test that each add increases the edge count."""
        g = SparseGraph(4)
        g.add((0, 1))
        assert g.count_edges() == 1
        g.add((1, 2))
        assert g.count_edges() == 2
        g.add((2, 3))
        assert g.count_edges() == 3

    def test_add_out_of_range(self):
        """Test that out-of-range endpoints are rejected."""
        g = SparseGraph(4)
        assert not g.add((0, 4))
        assert not g.add((4, 0))
        assert g.count_edges() == 0

    def test_add_bidirectional(self):
        """Test that bidirectional insertion adds two arcs."""
        g = SparseGraph(2)
        assert g.add((0, 1), EdgeType.BI)
        assert g.count_edges() == 2

    def test_duplicate_add_is_noop(self):
        """Test that inserting an existing edge changes nothing."""
        g = SparseGraph(3, [(0, 1)])
        assert g.add((0, 1))
        assert g.add((0, 1), EdgeType.UNI, 5)
        assert g.count_edges() == 1

    def test_weight_ignored(self):
        """Test that the sparse backend stores presence only."""
        g = SparseGraph(2)
        g.add((0, 1), weight=9)
        assert g.at((0, 1)) is True

    def test_remove(self):
        """Test edge removal."""
        g = SparseGraph(4, [(0, 1), (0, 2), (0, 3), (1, 0), (1, 2)])
        assert g.count_edges() == 5

        assert g.remove(Edge(0, 1))

        assert g.size() == 4
        assert g.count_edges() == 4
        assert not g.at((0, 1))

    def test_remove_absent_edge(self):
        """Test that removing a missing edge is a no-op."""
        g = SparseGraph(3, [(0, 1)])
        assert g.remove((1, 2))
        assert not g.remove((1, 3))
        assert g.count_edges() == 1

    def test_remove_bidirectional(self):
        """Test that bidirectional removal deletes both arcs."""
        g = SparseGraph(2)
        g.add((0, 1), EdgeType.BI)
        g.remove((1, 0), EdgeType.BI)
        assert g.count_edges() == 0

    def test_at_out_of_range(self):
        """Test that lookups outside the graph report no edge."""
        g = SparseGraph(2, [(0, 1)])
        assert not g.at((0, 3))
        assert (0, 1) in g


class TestSparseQueries:
    """Tests for neighborhood and edge list queries."""

    @pytest.fixture
    def graph(self):
        return SparseGraph(4, [(0, 1), (0, 2), (0, 3), (1, 0), (1, 2)])

    def test_incoming(self, graph):
        """Test incoming neighbor counts."""
        assert len(graph.incoming(0)) == 1
        assert len(graph.incoming(1)) == 1
        assert graph.incoming(2) == [0, 1]
        assert len(graph.incoming(3)) == 1
        assert graph.count_incoming(2) == 2
        assert graph.incoming(8) == []
        assert graph.count_incoming(8) == 0

    def test_outgoing(self, graph):
        """Test outgoing neighbor counts."""
        assert len(graph.outgoing(0)) == 3
        assert len(graph.outgoing(1)) == 2
        assert len(graph.outgoing(2)) == 0
        assert len(graph.outgoing(3)) == 0
        assert graph.count_outgoing(0) == 3
        assert graph.outgoing(-1) == []
        assert graph.count_outgoing(-1) == 0

    def test_outgoing_insertion_order(self):
        """Test that neighbors keep their insertion order."""
        g = SparseGraph(4, [(0, 3), (0, 1), (0, 2)])
        assert g.outgoing(0) == [3, 1, 2]

    def test_edges_vertex_major(self):
        """Test the edge list order."""
        g = SparseGraph(3, [(1, 0), (0, 2), (0, 1)])
        assert g.edges() == [Edge(0, 2), Edge(0, 1), Edge(1, 0)]


class TestSparseCopy:
    """Tests for copying and equality."""

    def test_copy_is_independent(self):
        """Test that copies do not share neighbor lists."""
        g = SparseGraph(3, [(0, 1)])
        for h in (g.copy(), copy.deepcopy(g)):
            assert h == g
            h.remove((0, 1))
            assert g.at((0, 1))

    def test_equality_ignores_insertion_order(self):
        """Test that equality compares neighbor sets."""
        assert SparseGraph(3, [(0, 1), (0, 2)]) == SparseGraph(3, [(0, 2), (0, 1)])
        assert SparseGraph(3, [(0, 1)]) != SparseGraph(3, [(1, 0)])
