"""
Pytest configuration and shared fixtures for the jfrreport test suite.

This module provides common fixtures, event builders and configuration
files for all test modules.
"""

import sys
import tempfile
import shutil
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jfrreport.models import (  # noqa: E402
    JVM_INFO_EVENT_PATH,
    RECORDING_LOST_EVENT_PATH,
    SAMPLING_EVENT_PATH,
    Event,
    Frame,
    StackTrace,
)
from jfrreport.recording import MemoryRecordingReader  # noqa: E402

SECOND = 1_000_000_000


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Event Builders
# ============================================================================


class EventBuilder:
    """Builds decoded events for tests."""

    @staticmethod
    def frame(qualified_method: str, *argument_types: str) -> Frame:
        """Build a frame from ``package.Type.method``."""
        type_name, _, method_name = qualified_method.rpartition(".")
        return Frame(type_name=type_name, method_name=method_name,
                     argument_types=tuple(argument_types))

    @classmethod
    def sample(
        cls,
        timestamp: int,
        methods_leaf_first: Sequence[str],
        truncated: bool = False,
    ) -> Event:
        """Build an execution sample from qualified method names, leaf first."""
        frames = tuple(cls.frame(method) for method in methods_leaf_first)
        return Event(
            event_type_path=SAMPLING_EVENT_PATH,
            timestamp=timestamp,
            stack_trace=StackTrace(frames=frames, truncated=truncated),
            event_type_name="Method Profiling Sample",
        )

    @staticmethod
    def jvm_info(timestamp: int, java_arguments: str = "") -> Event:
        return Event(
            event_type_path=JVM_INFO_EVENT_PATH,
            timestamp=timestamp,
            event_type_name="JVM Information",
            fields={
                "jvmName": "OpenJDK 64-Bit Server VM",
                "javaArguments": java_arguments,
            },
        )

    @staticmethod
    def buffer_lost(timestamp: int) -> Event:
        return Event(
            event_type_path=RECORDING_LOST_EVENT_PATH,
            timestamp=timestamp,
            event_type_name="Recording buffer lost",
        )

    @classmethod
    def samples(
        cls,
        methods_leaf_first: Sequence[str],
        count: int,
        start: int = 0,
        step: int = 1,
    ) -> List[Event]:
        """Build ``count`` identical samples ``step`` nanoseconds apart."""
        return [cls.sample(start + i * step, methods_leaf_first) for i in range(count)]


@pytest.fixture
def events():
    """Provide the event builder."""
    return EventBuilder


@pytest.fixture
def app_stack() -> Tuple[str, ...]:
    """A five-frame application stack, leaf first."""
    return (
        "com.example.app.Repository.query",
        "com.example.app.Service.load",
        "com.example.app.Controller.handle",
        "com.example.app.Router.dispatch",
        "com.example.app.Main.main",
    )


@pytest.fixture
def memory_reader(app_stack):
    """Recording with ten samples of one stack plus a JVM info event."""
    recorded = EventBuilder.samples(app_stack, 10, start=SECOND, step=SECOND // 10)
    recorded.append(EventBuilder.jvm_info(SECOND, "-jar app.jar"))
    return MemoryRecordingReader(recorded)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Sample ``[report]`` configuration data for testing."""
    return {
        "filters": {
            "include": "",
            "exclude": "^(java\\.|sun\\.)",
            "grep": "",
            "cutoff": "",
        },
        "sampling": {
            "minimum_samples": 2,
            "minimum_samples_frame_depth": 3,
            "reverse": False,
        },
        "window": {
            "begin": 0,
            "length": 0,
            "duration": 0,
            "first_split": False,
        },
        "output": {
            "compress_package_names": True,
            "sort_frames": True,
        },
        "renderer": {
            "command": "flamegraph.pl",
            "width": 1200,
        },
        "execution": {
            "max_parallel_windows": 1,
            "thread_name_prefix": "WindowWorker",
        },
        "storage": {
            "export_format": "none",
            "compression": "snappy",
        },
    }


@pytest.fixture
def config_files(temp_dir, sample_config_data):
    """Create a temporary configuration file for testing."""
    import toml

    config_file = temp_dir / "config.toml"
    with open(config_file, "w") as f:
        toml.dump({"report": sample_config_data}, f)

    return {
        "config": config_file,
        "dir": temp_dir,
    }


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    original_config_path = Path(__file__).parent.parent / "conf" / "config.toml"

    yield  # Run the test

    from jfrreport.config import clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(original_config_path)


def read_lines(path: Path) -> List[str]:
    """Read the non-empty lines of a text file."""
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line]


def parse_collapsed(path: Path) -> Dict[str, int]:
    """Parse a collapsed stack file into ``{stack: count}``."""
    counts = {}
    for line in read_lines(path):
        stack, _, count = line.rpartition(" ")
        counts[stack] = int(count)
    return counts


@pytest.fixture
def collapsed_parser():
    return parse_collapsed