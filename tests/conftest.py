"""Pytest fixtures shared by all tests."""

import pytest


@pytest.fixture
def simple_edge_file(tmp_path):
    """Edge-list file with the simple scenario, a comment, and a blank line."""
    from tests.core.graph_test_helpers import SIMPLE_EDGE_LIST

    path = tmp_path / "simple_follows.txt"
    path.write_text(SIMPLE_EDGE_LIST, encoding="utf-8")
    return path
