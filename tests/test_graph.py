import pytest

from algokit.graph import Graph

EDGES = [(0, 1), (1, 2), (2, 3), (3, 5), (5, 6), (4, 5), (0, 4), (3, 4)]


@pytest.fixture
def sample_graph():
    g = Graph(7)
    for i, j in EDGES:
        g.add_edge(i, j)
    return g


def test_bfs_order(sample_graph):
    assert sample_graph.bfs(1) == [1, 0, 2, 4, 3, 5, 6]


def test_dfs_order(sample_graph):
    assert sample_graph.dfs(1) == [1, 0, 4, 5, 3, 2, 6]


@pytest.mark.parametrize("source", range(7))
def test_traversals_visit_every_vertex_once(sample_graph, source):
    assert sorted(sample_graph.bfs(source)) == list(range(7))
    assert sorted(sample_graph.dfs(source)) == list(range(7))
    assert sample_graph.bfs(source)[0] == source
    assert sample_graph.dfs(source)[0] == source


def test_bfs_levels_are_non_decreasing(sample_graph):
    order = sample_graph.bfs(0)
    distance = {0: 0}
    for vertex in order:
        for nbr in sample_graph.adjacency[vertex]:
            distance.setdefault(nbr, distance[vertex] + 1)
    distances = [distance[v] for v in order]
    assert distances == sorted(distances)


def test_directed_edge_is_one_way():
    g = Graph(3)
    g.add_edge(0, 1, undirected=False)
    g.add_edge(1, 2, undirected=False)
    assert g.bfs(2) == [2]
    assert g.dfs(0) == [0, 1, 2]


def test_disconnected_vertex_not_reached():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    assert 3 not in g.bfs(0)
    assert 3 not in g.dfs(0)
    assert g.bfs(3) == [3]


def test_out_of_range_vertex_raises():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)
    with pytest.raises(IndexError):
        g.bfs(5)
    with pytest.raises(IndexError):
        g.dfs(-1)