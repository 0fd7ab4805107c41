from classic_algorithms.stats import RuntimeStats


def test_fresh_stats_start_at_zero():
    stats = RuntimeStats()
    assert stats.as_dict() == {"comparisons": 0, "swaps": 0, "insertions": 0, "operations": 0}
    assert stats.total == 0


def test_str_summary():
    stats = RuntimeStats(comparisons=3, swaps=2, insertions=1, operations=4)
    assert str(stats) == "comparisons=3, swaps=2, insertions=1, operations=4"
    assert stats.total == 10


def test_snapshot_is_independent():
    stats = RuntimeStats(comparisons=1)
    copy = stats.snapshot()
    stats.comparisons += 1
    assert copy.comparisons == 1
    assert copy == RuntimeStats(comparisons=1)


def test_reset():
    stats = RuntimeStats(1, 2, 3, 4)
    stats.reset()
    assert stats == RuntimeStats()
