"""
Pytest configuration and shared fixtures.
"""

import pytest

from graphcore import Graph


@pytest.fixture
def triangle() -> Graph:
    """Three vertices, undirected edges 0-1, 1-2, 2-0."""
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    return g


@pytest.fixture
def chain() -> Graph:
    """One-way chain 0 -> 1 -> 2."""
    g = Graph(3)
    g.add_edge(0, 1, undirected=False)
    g.add_edge(1, 2, undirected=False)
    return g


@pytest.fixture
def weighted_square() -> Graph:
    """A-B (5), B-C (3), C-D (2) and a direct A-D (7); A..D = 0..3."""
    g = Graph(4)
    g.add_edge(0, 1, weight=5)
    g.add_edge(1, 2, weight=3)
    g.add_edge(2, 3, weight=2)
    g.add_edge(0, 3, weight=7)
    return g


@pytest.fixture
def mst_graph() -> Graph:
    """Five-vertex connected weighted graph whose MST weighs 16."""
    g = Graph(5)
    for u, v, w in [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8),
                    (1, 4, 5), (2, 4, 7), (3, 4, 9)]:
        g.add_edge(u, v, weight=w)
    return g


@pytest.fixture
def client():
    from main import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
