"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def simple_graph():
    """Scenario with a duplicate edge and two vertices nobody follows."""
    from tests.core.graph_test_helpers import make_simple_graph

    return make_simple_graph()


@pytest.fixture
def custom_graph():
    """Two-level star: 0 <- {1, 2, 3, 4}, 4 <- {5, 6}."""
    from tests.core.graph_test_helpers import make_custom_graph

    return make_custom_graph()


@pytest.fixture
def strongly_connected_graph():
    """4-cycle with multi-edges where the greedy cover is not optimal."""
    from tests.core.graph_test_helpers import make_strongly_connected_graph

    return make_strongly_connected_graph()


@pytest.fixture
def graph():
    """Fresh, empty FollowGraph."""
    from followcover.graph import FollowGraph

    return FollowGraph()
