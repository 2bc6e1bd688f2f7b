"""Tests for FollowGraph.find_minimum_cover() - the greedy covering set."""

import random

import pytest

from followcover.graph import FollowGraph

from tests.core.graph_test_helpers import (
    CUSTOM_EDGES,
    SIMPLE_EDGES,
    STRONGLY_CONNECTED_EDGES,
    build_graph,
    uncovered_followed_vertices,
)


class TestReferenceScenarios:
    """The three hand-checked networks."""

    def test_simple_network(self, simple_graph):
        cover = simple_graph.find_minimum_cover()
        assert 3 in cover
        assert 4 not in cover

    def test_simple_network_exact_cover(self, simple_graph):
        # 1 (in-degree 3) then 3 (in-degree 2) visit all five vertices, so
        # 0 is never picked.
        assert simple_graph.find_minimum_cover() == {1, 3}

    def test_custom_network(self, custom_graph):
        cover = custom_graph.find_minimum_cover()
        assert 4 in cover
        assert 6 not in cover
        assert cover == {0, 4}

    def test_strongly_connected_network(self, strongly_connected_graph):
        # The true minimum is 2; this greedy order finds 3.
        cover = strongly_connected_graph.find_minimum_cover()
        assert len(cover) == 3
        assert cover == {0, 1, 3}

    def test_membership_with_snapshot_ids(self, simple_graph):
        cover = simple_graph.find_minimum_cover()
        assert simple_graph.vertex(3).id in cover

    @pytest.mark.parametrize(
        "vertex_count,edges",
        [(5, SIMPLE_EDGES), (7, CUSTOM_EDGES), (4, STRONGLY_CONNECTED_EDGES)],
    )
    def test_reference_covers_are_valid(self, vertex_count, edges):
        g = build_graph(range(vertex_count), edges)
        cover = g.find_minimum_cover()
        assert uncovered_followed_vertices(g, edges, cover) == set()


class TestGreedyWalk:
    """Ordering, early termination, and untracked vertices."""

    def test_empty_graph(self):
        assert FollowGraph().find_minimum_cover() == set()

    def test_no_edges(self):
        g = build_graph(range(3), [])
        assert g.find_minimum_cover() == set()

    def test_highest_in_degree_first(self):
        # 9 has the most followers and covers all of them in one pick.
        edges = [(1, 9), (2, 9), (3, 9), (9, 1)]
        g = build_graph([1, 2, 3, 9], edges)
        assert g.find_minimum_cover() == {9}

    def test_stops_once_every_vertex_is_visited(self):
        # After picking 0, every vertex is visited; 1 is never picked.
        edges = [(1, 0), (2, 0), (0, 1)]
        g = build_graph(range(3), edges)
        assert g.find_minimum_cover() == {0}

    def test_ties_follow_in_degree_index_order(self):
        # 2 and 1 both have in-degree 1; 2 received its edge first.
        edges = [(0, 2), (0, 1)]
        g = build_graph(range(3), edges)
        cover = g.find_minimum_cover()
        # 2 is picked first, visiting {2, 0}; 1 is still unvisited so it is
        # picked too.
        assert cover == {1, 2}

    def test_tie_order_changes_result(self):
        # Mutual follows: whichever vertex received an edge first is
        # picked, and that single pick visits both vertices.
        first = build_graph(range(2), [(0, 1), (1, 0)])
        second = build_graph(range(2), [(1, 0), (0, 1)])
        assert first.find_minimum_cover() == {1}
        assert second.find_minimum_cover() == {0}

    def test_vertex_nobody_follows_is_never_picked(self):
        g = build_graph(range(3), [(0, 1)])
        cover = g.find_minimum_cover()
        assert cover == {1}
        assert 2 not in cover

    def test_walk_exhausted_without_full_coverage(self):
        # 5 is isolated, so visited never reaches the vertex count.
        g = build_graph([0, 1, 5], [(0, 1), (1, 0)])
        assert g.find_minimum_cover() == {0, 1}

    def test_self_edge(self):
        g = build_graph([7], [(7, 7)])
        assert g.find_minimum_cover() == {7}

    def test_repeatable(self, strongly_connected_graph):
        results = {frozenset(strongly_connected_graph.find_minimum_cover()) for _ in range(5)}
        assert len(results) == 1

    def test_does_not_mutate_graph(self, simple_graph):
        before = simple_graph.in_degrees()
        simple_graph.find_minimum_cover()
        assert simple_graph.in_degrees() == before
        assert simple_graph.vertex_count() == 5


class TestCoverValidity:
    """Every followed vertex is in the cover or follows a cover member."""

    @pytest.mark.parametrize("seed", range(10))
    def test_random_networks(self, seed):
        rng = random.Random(seed)
        vertex_count = rng.randint(5, 40)
        edges = [
            (rng.randrange(vertex_count), rng.randrange(vertex_count))
            for _ in range(rng.randint(vertex_count, vertex_count * 3))
        ]
        g = build_graph(range(vertex_count), edges)

        cover = g.find_minimum_cover()

        assert cover <= set(g.in_degrees())
        assert uncovered_followed_vertices(g, edges, cover) == set()
