"""
Unit tests for significance grouping and stack collapsing.
"""

import random

import pytest

from jfrreport.aggregation.collapser import collapse_stacks
from jfrreport.aggregation.grouper import StackTraceRoots


def identity(frame):
    return frame


@pytest.mark.unit
class TestStackTraceRoots:
    """Test cases for root grouping and the significance threshold."""

    def test_same_prefix_same_group(self):
        roots = StackTraceRoots(minimum_samples_frame_depth=2)
        roots.add_stack_trace(["A", "B", "C"])
        roots.add_stack_trace(["A", "B", "D", "E"])
        roots.add_stack_trace(["A", "X"])

        assert len(roots) == 2
        assert roots.root_key(["A", "B", "C"]) == "A;B"
        assert len(roots.roots["A;B"]) == 2

    def test_short_trace_uses_all_frames_as_key(self):
        roots = StackTraceRoots(minimum_samples_frame_depth=5)

        assert roots.root_key(["A", "B"]) == "A;B"

    def test_group_of_exactly_minimum_samples_dropped(self):
        roots = StackTraceRoots(minimum_samples_frame_depth=2)
        for _ in range(3):
            roots.add_stack_trace(["A", "B", "C"])

        assert list(roots.significant_stacks(3)) == []

    def test_group_of_minimum_samples_plus_one_kept(self):
        roots = StackTraceRoots(minimum_samples_frame_depth=2)
        for _ in range(4):
            roots.add_stack_trace(["A", "B", "C"])

        assert len(list(roots.significant_stacks(3))) == 4

    def test_all_members_of_significant_group_kept(self):
        """Scenario: 4 traces sharing A;B with different tails are all counted."""
        roots = StackTraceRoots(minimum_samples_frame_depth=2)
        tails = [["C"], ["D"], ["C", "E"], []]
        for tail in tails:
            roots.add_stack_trace(["A", "B"] + tail)

        significant = list(roots.significant_stacks(3))

        assert len(significant) == 4
        assert ["A", "B"] in significant

    def test_minimum_samples_zero_keeps_single_traces(self):
        roots = StackTraceRoots()
        roots.add_stack_trace(["A"])

        assert list(roots.significant_stacks(0)) == [["A"]]


@pytest.mark.unit
class TestCollapseStacks:
    """Test cases for collapsed stack counting."""

    def test_counts_identical_stacks(self):
        stacks = [["A", "B"], ["A", "B"], ["A", "C"]]

        assert collapse_stacks(stacks, identity) == {"A;B": 2, "A;C": 1}

    def test_format_applied_to_every_frame(self):
        counts = collapse_stacks([["a.b.c.d.M.m()", "x.Y.z()"]], lambda f: f.upper())

        assert counts == {"A.B.C.D.M.M();X.Y.Z()": 1}

    def test_counting_is_order_independent(self):
        stacks = [["A", "B"]] * 5 + [["A", "C"]] * 3 + [["D"]] * 2
        shuffled = list(stacks)
        random.Random(42).shuffle(shuffled)

        assert collapse_stacks(stacks, identity) == collapse_stacks(shuffled, identity)

    def test_empty_input(self):
        assert collapse_stacks([], identity) == {}
