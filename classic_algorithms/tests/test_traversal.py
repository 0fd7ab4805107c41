import pytest

from classic_algorithms.errors import MissingNodeError
from classic_algorithms.graph.basic.bfs import BreadthFirstSearch, bfs
from classic_algorithms.graph.basic.dfs import DepthFirstSearch, dfs
from classic_algorithms.utils import Graph


@pytest.fixture
def graph():
    graph = Graph()
    for src, dest in [("0", "1"), ("0", "4"), ("1", "2"), ("1", "3"),
                      ("1", "4"), ("2", "3"), ("3", "4")]:
        graph.add_edge(src, dest)
    return graph


def test_bfs_visits_all_nodes_within_depth(graph):
    assert bfs(graph, "0", 5) == ["0", "1", "4", "2", "3"]


def test_bfs_respects_max_depth(graph):
    assert bfs(graph, "0", 1) == ["0", "1", "4"]
    assert bfs(graph, "0", 0) == ["0"]


def test_bfs_negative_depth_is_empty(graph):
    assert bfs(graph, "0", -1) == []


def test_bfs_without_depth_limit(graph):
    assert BreadthFirstSearch().execute(graph, "3") == ["3", "1", "2", "4", "0"]


def test_bfs_depth_counts_hops_not_dequeue_order():
    # a - b - c - d 链上，深度 2 只能到达 c
    graph = Graph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("c", "d")
    assert bfs(graph, "a", 2) == ["a", "b", "c"]
    assert bfs(graph, "b", 1) == ["b", "a", "c"]


def test_dfs_pushes_all_neighbours_before_popping(graph):
    assert dfs(graph, "0") == ["0", "4", "3", "2", "1"]


def test_dfs_visits_each_node_once(graph):
    result = DepthFirstSearch().execute(graph, "2")
    assert len(result) == len(set(result))
    assert set(result) == {"0", "1", "2", "3", "4"}


def test_traversals_stay_in_component():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(3, 4)
    assert bfs(graph, 1) == [1, 2]
    assert dfs(graph, 4) == [4, 3]


def test_traversals_ignore_duplicate_edges():
    graph = Graph()
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")
    graph.add_edge("b", "b")
    assert bfs(graph, "a") == ["a", "b"]
    assert dfs(graph, "a") == ["a", "b"]


@pytest.mark.parametrize("traverse", [lambda g, s: bfs(g, s, 3), dfs])
def test_missing_start_node_raises(graph, traverse):
    with pytest.raises(MissingNodeError):
        traverse(graph, "9")


def test_traversal_does_not_modify_graph(graph):
    before = graph.describe()
    bfs(graph, "0", 1)
    dfs(graph, "0")
    assert graph.describe() == before
