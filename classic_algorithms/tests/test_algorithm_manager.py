import pytest

from classic_algorithms import algorithm_manager
from classic_algorithms.algorithm_manager import (
    AlgorithmCategory,
    AlgorithmConfig,
    AlgorithmManager,
    AlgorithmRegistry,
)
from classic_algorithms.errors import InvalidInputError, MissingNodeError
from classic_algorithms.sorting.basic.bubble_sort import BubbleSort
from classic_algorithms.stats import RuntimeStats
from classic_algorithms.utils import Graph


def test_default_registrations():
    registry = AlgorithmRegistry()
    assert registry.list_algorithms(AlgorithmCategory.SORTING) == [
        "bubble_sort", "insertion_sort", "merge_sort", "quick_sort", "counting_sort",
    ]
    assert registry.list_algorithms(AlgorithmCategory.GRAPH) == ["bfs", "dfs"]
    assert registry.get_algorithm("bubble_sort") is BubbleSort
    assert registry.get_category("dfs") is AlgorithmCategory.GRAPH


def test_register_rejects_non_algorithms():
    registry = AlgorithmRegistry()
    with pytest.raises(ValueError):
        registry.register("bogus", dict, AlgorithmCategory.SORTING)
    with pytest.raises(ValueError):
        registry.register("bogus", sorted, AlgorithmCategory.SORTING)


def test_unknown_algorithm():
    with pytest.raises(KeyError):
        AlgorithmManager().execute_algorithm("bogo_sort", [1])


def test_execute_sort_records_stats_snapshot():
    manager = AlgorithmManager()
    stats = RuntimeStats()
    assert manager.execute_algorithm("counting_sort", [100, 200, 15, 30, 10, 50], stats) == [
        10, 15, 30, 50, 100, 200,
    ]
    (metrics,) = manager.get_metrics("counting_sort")
    assert metrics.success
    assert metrics.input_size == 6
    assert metrics.stats == {"comparisons": 0, "swaps": 0, "insertions": 12, "operations": 0}


def test_execute_traversal():
    graph = Graph()
    graph.add_edge("0", "1")
    graph.add_edge("1", "2")
    manager = AlgorithmManager()
    assert manager.execute_algorithm("bfs", graph, "0", max_depth=1) == ["0", "1"]
    assert manager.execute_algorithm("dfs", graph, "2") == ["2", "1", "0"]
    assert manager.get_metrics("bfs")[0].input_size == 3


def test_failures_are_recorded_and_reraised():
    manager = AlgorithmManager()
    with pytest.raises(InvalidInputError):
        manager.execute_algorithm("counting_sort", [-1])
    with pytest.raises(MissingNodeError):
        manager.execute_algorithm("dfs", Graph(), "x")

    (metrics,) = manager.get_metrics("counting_sort")
    assert not metrics.success
    assert "-1" in metrics.error_message
    assert manager.get_performance_summary("counting_sort") == {
        "total_executions": 1,
        "success_rate": 0.0,
    }


def test_performance_summary():
    manager = AlgorithmManager()
    assert manager.get_performance_summary("quick_sort") == {}
    for _ in range(3):
        manager.execute_algorithm("quick_sort", [3, 2, 1])
    summary = manager.get_performance_summary("quick_sort")
    assert summary["total_executions"] == 3
    assert summary["success_rate"] == 1.0
    assert summary["min_execution_time"] <= summary["avg_execution_time"] <= summary["max_execution_time"]

    manager.clear_metrics("quick_sort")
    assert manager.get_metrics("quick_sort") == []


def test_history_limit_and_disabled_metrics():
    registry = AlgorithmRegistry()
    registry.register("bubble_sort", BubbleSort, AlgorithmCategory.SORTING, AlgorithmConfig(max_history=2))
    registry.register("quiet", BubbleSort, AlgorithmCategory.SORTING, AlgorithmConfig(enable_metrics=False))
    manager = AlgorithmManager(registry)
    for _ in range(5):
        manager.execute_algorithm("bubble_sort", [2, 1])
        manager.execute_algorithm("quiet", [2, 1])
    assert len(manager.get_metrics("bubble_sort")) == 2
    assert manager.get_metrics("quiet") == []


def test_module_level_helpers(monkeypatch):
    monkeypatch.setattr(algorithm_manager, "_algorithm_manager", None)
    algorithm_manager.register_algorithm("sorter", BubbleSort, AlgorithmCategory.SORTING)
    assert algorithm_manager.execute_algorithm("sorter", ["b", "a"]) == ["a", "b"]
    assert algorithm_manager.get_algorithm_manager().get_metrics("sorter")


def test_reused_stats_record_per_execution_counts():
    manager = AlgorithmManager()
    stats = RuntimeStats()
    manager.execute_algorithm("bubble_sort", [2, 1], stats)
    manager.execute_algorithm("bubble_sort", [2, 1], stats)

    assert [m.stats for m in manager.get_metrics("bubble_sort")] == [
        {"comparisons": 1, "swaps": 1, "insertions": 0, "operations": 1},
        {"comparisons": 1, "swaps": 1, "insertions": 0, "operations": 1},
    ]
    # 调用方持有的计数器仍然是累计值
    assert stats.comparisons == 2


@pytest.mark.parametrize("max_history", [0, -3])
def test_max_history_must_be_positive(max_history):
    with pytest.raises(ValueError):
        AlgorithmConfig(max_history=max_history)


def test_history_limit_of_one_keeps_latest():
    registry = AlgorithmRegistry()
    registry.register("bubble_sort", BubbleSort, AlgorithmCategory.SORTING, AlgorithmConfig(max_history=1))
    manager = AlgorithmManager(registry)
    manager.execute_algorithm("bubble_sort", [2, 1])
    manager.execute_algorithm("bubble_sort", [3, 2, 1])
    (metrics,) = manager.get_metrics("bubble_sort")
    assert metrics.input_size == 3
