"""Tests for plugin collaborators: table range expansion and line monitor."""

import threading

from structlog.testing import capture_logs

from dfsaccess.plugin import LineMonitor, PluginStatus, expand_table_ranges


class TestExpandTableRanges:
    """Test suite for expand_table_ranges."""

    def test_plain_names_pass_through(self):
        assert expand_table_ranges(" users , orders ") == ["users", "orders"]

    def test_simple_range(self):
        """Test inclusive numeric ranges."""
        assert expand_table_ranges("tbl[0-3]") == ["tbl0", "tbl1", "tbl2", "tbl3"]

    def test_zero_padded_range(self):
        """Test a zero-prefixed start pads to its width."""
        assert expand_table_ranges("tbl[08-11]") == ["tbl08", "tbl09", "tbl10", "tbl11"]

    def test_reversed_bounds_are_swapped(self):
        assert expand_table_ranges("tbl[3-1]") == ["tbl1", "tbl2", "tbl3"]

    def test_suffix_is_kept(self):
        assert expand_table_ranges("log[1-2]_2024") == ["log1_2024", "log2_2024"]

    def test_mixed_list(self):
        """Test ranges and plain names in one list."""
        assert expand_table_ranges("a[0-1],b,c[1-1]") == ["a0", "a1", "b", "c1"]

    def test_range_expansion_size(self):
        assert len(expand_table_ranges("tbl[0-32]")) == 33


class TestLineMonitor:
    """Test suite for LineMonitor."""

    def test_initial_state(self):
        monitor = LineMonitor("orders", 2)

        assert monitor.succeeded_lines == 0
        assert monitor.failed_lines == 0
        assert monitor.status is PluginStatus.WAITING

    def test_counters(self):
        """Test success and failure counters and their setters."""
        monitor = LineMonitor("orders")

        assert monitor.line_success() == 1
        assert monitor.line_success() == 2
        assert monitor.set_failed_lines(5) == 5
        assert monitor.set_succeeded_lines(10) == 10

        assert monitor.succeeded_lines == 10
        assert monitor.failed_lines == 5

    def test_line_fail_logs_info(self):
        """Test failed lines are counted and logged."""
        monitor = LineMonitor("orders", 1)

        with capture_logs() as logs:
            assert monitor.line_fail("bad field count") == 1

        assert logs[0]["event"] == "line_failed"
        assert logs[0]["info"] == "bad field count"
        assert logs[0]["target"] == "orders"

    def test_concurrent_counting(self):
        """Test counters are consistent under concurrent updates."""
        monitor = LineMonitor("orders")

        def worker():
            for _ in range(1000):
                monitor.line_success()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert monitor.succeeded_lines == 8000

    def test_snapshot(self):
        monitor = LineMonitor("orders", 3)
        monitor.status = PluginStatus.READ
        monitor.line_success()

        assert monitor.snapshot() == {
            "target_name": "orders",
            "target_id": 3,
            "status": "read",
            "succeeded_lines": 1,
            "failed_lines": 0,
        }
