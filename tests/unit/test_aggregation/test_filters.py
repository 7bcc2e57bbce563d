"""
Unit tests for the stack trace filter chain.
"""

import re

import pytest

from jfrreport.aggregation.filters import FilterChain
from jfrreport.models import FilterConfig, ReportConfig, SamplingConfig

# Leaf first, as produced from a recording.
STACK = [
    "java.util.HashMap.get(java.lang.Object)",
    "com.example.Cache.lookup(java.lang.String)",
    "com.example.Service.handle()",
    "org.apache.catalina.Valve.invoke()",
    "java.lang.Thread.run()",
]


@pytest.mark.unit
class TestGrepFilter:
    """Test cases for the any-frame grep filter."""

    def test_no_grep_accepts_everything(self):
        assert FilterChain().matches_grep_filter(STACK)

    def test_grep_matches_any_frame(self):
        chain = FilterChain(grep=re.compile(r"Cache\.lookup"))

        assert chain.matches_grep_filter(STACK)

    def test_grep_without_match_discards_trace(self):
        chain = FilterChain(grep=re.compile(r"NoSuchClass"))

        assert not chain.matches_grep_filter(STACK)
        assert chain.apply(STACK) is None


@pytest.mark.unit
class TestCutoff:
    """Test cases for the cutoff filter."""

    def test_cutoff_keeps_frames_before_first_match(self):
        """A cutoff matching the 3rd of 5 frames leaves 2 frames."""
        chain = FilterChain(cutoff=re.compile(r"Service\.handle"))

        assert chain.apply_cutoff(STACK) == STACK[:2]

    def test_cutoff_without_match_keeps_all(self):
        chain = FilterChain(cutoff=re.compile(r"Nothing"))

        assert chain.apply_cutoff(STACK) == STACK

    def test_cutoff_on_leaf_empties_trace(self):
        chain = FilterChain(cutoff=re.compile(r"HashMap"))

        assert chain.apply(STACK) is None

    def test_cutoff_before_include_exclude(self):
        chain = FilterChain(cutoff=re.compile(r"Service\.handle"))

        assert chain.apply(STACK) == [STACK[1], STACK[0]]


@pytest.mark.unit
class TestIncludeExclude:
    """Test cases for per-frame include/exclude filtering."""

    def test_survivors_match_include_and_not_exclude(self):
        include = re.compile(r"^com\.|^org\.")
        exclude = re.compile(r"apache")
        chain = FilterChain(include=include, exclude=exclude, reverse=True)

        survivors = chain.apply(STACK)

        assert survivors == [STACK[1], STACK[2]]
        for signature in survivors:
            assert include.search(signature)
            assert not exclude.search(signature)

    def test_patterns_use_search_semantics(self):
        chain = FilterChain(include=re.compile(r"Cache"))

        assert chain.matches_method("com.example.Cache.lookup()")
        assert not chain.matches_method("com.example.Service.handle()")

    def test_all_frames_excluded_discards_trace(self):
        chain = FilterChain(exclude=re.compile(r"."))

        assert chain.apply(STACK) is None


@pytest.mark.unit
class TestOrientation:
    """Test cases for output frame order."""

    def test_default_order_is_root_first(self):
        assert FilterChain().apply(STACK) == list(reversed(STACK))

    def test_reverse_keeps_leaf_first(self):
        assert FilterChain(reverse=True).apply(STACK) == STACK

    def test_input_is_not_modified(self):
        stack = list(STACK)
        FilterChain().apply(stack)

        assert stack == STACK

    def test_from_config(self):
        config = ReportConfig(
            filters=FilterConfig(include=None, exclude=re.compile(r"^java\."), grep=None, cutoff=None),
            sampling=SamplingConfig(reverse=True),
        )
        chain = FilterChain.from_config(config)

        assert chain.reverse is True
        assert chain.apply(STACK) == STACK[1:4]
