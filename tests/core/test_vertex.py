"""Tests for Vertex - incoming edges, sources, and snapshots."""

import pytest

from followcover.graph import Edge, Vertex, VertexNotFoundError


class TestVertexCreation:
    """Tests for a freshly created vertex."""

    def test_new_vertex_is_empty(self):
        v = Vertex(7)
        assert v.id == 7
        assert v.edges() == []
        assert v.sources() == set()
        assert v.source_counts() == {}
        assert v.in_degree == 0


class TestAddIncomingEdge:
    """Tests for Vertex.add_incoming_edge()."""

    def test_records_edge_source_and_count(self):
        target = Vertex(1)
        source = Vertex(2)

        edge = target.add_incoming_edge(source)

        assert isinstance(edge, Edge)
        assert edge.start_id == 2
        assert edge.end_id == 1
        assert target.edges() == [edge]
        assert target.sources() == {2}
        assert target.source_counts() == {2: 1}

    def test_multi_edges_collapse_in_sources(self):
        target = Vertex(1)
        source = Vertex(2)
        for _ in range(4):
            target.add_incoming_edge(source)

        assert target.in_degree == 4
        assert target.sources() == {2}
        assert target.edge_count_from(source) == 4

    def test_source_is_not_modified(self):
        target = Vertex(1)
        source = Vertex(2)
        target.add_incoming_edge(source)

        assert source.edges() == []
        assert source.sources() == set()

    def test_counts_match_edges(self):
        target = Vertex(0)
        for source_id in (1, 2, 2, 3, 3, 3):
            target.add_incoming_edge(Vertex(source_id))

        counts = target.source_counts()
        assert sum(counts.values()) == len(target.edges())
        assert set(counts) == target.sources()
        assert counts == {1: 1, 2: 2, 3: 3}

    def test_edges_keep_insertion_order(self):
        target = Vertex(0)
        for source_id in (3, 1, 2):
            target.add_incoming_edge(Vertex(source_id))

        assert [e.start_id for e in target.edges()] == [3, 1, 2]


class TestEdgeCountFrom:
    """Tests for Vertex.edge_count_from()."""

    def test_accepts_vertex_or_id(self):
        target = Vertex(1)
        target.add_incoming_edge(Vertex(5))
        assert target.edge_count_from(Vertex(5)) == 1
        assert target.edge_count_from(5) == 1

    def test_unknown_source_raises(self):
        target = Vertex(1)
        target.add_incoming_edge(Vertex(5))

        with pytest.raises(VertexNotFoundError) as exc_info:
            target.edge_count_from(6)
        assert exc_info.value.key == 6

    def test_unknown_source_is_a_key_error(self):
        with pytest.raises(KeyError):
            Vertex(1).edge_count_from(2)


class TestVertexSnapshots:
    """Accessors and copy() hand out independent values."""

    def test_edges_returns_copy(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))

        edges = v.edges()
        edges.clear()

        assert len(v.edges()) == 1

    def test_sources_returns_copy(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))

        v.sources().add(99)

        assert v.sources() == {2}

    def test_source_counts_returns_copy(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))

        counts = v.source_counts()
        counts[2] = 100

        assert v.edge_count_from(2) == 1

    def test_copy_is_independent(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))

        snapshot = v.copy()
        snapshot.add_incoming_edge(Vertex(3))

        assert v.sources() == {2}
        assert v.in_degree == 1
        assert snapshot.sources() == {2, 3}
        assert snapshot.in_degree == 2

    def test_copy_preserves_state(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))
        v.add_incoming_edge(Vertex(2))

        snapshot = v.copy()

        assert snapshot is not v
        assert snapshot.id == v.id
        assert snapshot.edges() == v.edges()
        assert snapshot.source_counts() == {2: 2}


class TestVertexIdentity:
    """Vertices compare and hash by id."""

    def test_equal_by_id(self):
        assert Vertex(1) == Vertex(1)
        assert Vertex(1) != Vertex(2)

    def test_snapshot_equals_original(self):
        v = Vertex(1)
        v.add_incoming_edge(Vertex(2))
        assert v.copy() == v
        assert hash(v.copy()) == hash(v)

    def test_usable_as_set_and_dict_key(self):
        v = Vertex(4)
        assert len({v, v.copy(), Vertex(4)}) == 1
        assert {v: "x"}[Vertex(4)] == "x"

    def test_not_equal_to_bare_id(self):
        assert Vertex(1) != 1
