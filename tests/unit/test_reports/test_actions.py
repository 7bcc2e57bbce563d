"""
Unit tests for the report action registry and the window runner.
"""

import io
from dataclasses import replace

import pytest

from jfrreport.aggregation import process_window
from jfrreport.models import (
    ExecutionConfig,
    EventType,
    ReportConfig,
    WindowConfig,
)
from jfrreport.recording import MemoryRecordingReader
from jfrreport.reports import (
    DEFAULT_ACTION,
    REPORT_ACTIONS,
    ActionContext,
    ReportRunner,
    get_report_action,
)

SECOND = 1_000_000_000


@pytest.mark.unit
class TestReportActionRegistry:
    """Test cases for the static action registry."""

    def test_registered_actions(self):
        assert list(REPORT_ACTIONS) == ["flameGraph", "stacks", "topframes", "dumpinfo", "recordtypes"]
        assert DEFAULT_ACTION == "flameGraph"

    def test_default_extensions(self):
        assert get_report_action("flameGraph").default_extension == "svg"
        assert get_report_action("stacks").default_extension == "txt"
        assert get_report_action("topframes").default_extension == "top.txt"
        assert not get_report_action("dumpinfo").needs_output
        assert not get_report_action("recordtypes").needs_output

    def test_unknown_action(self):
        with pytest.raises(KeyError, match="Unknown action"):
            get_report_action("svg")

    def test_output_actions_require_output_file(self, memory_reader):
        context = ActionContext(reader=memory_reader, config=ReportConfig())

        with pytest.raises(ValueError):
            get_report_action("stacks").run(context)


@pytest.mark.unit
class TestPrintingActions:
    """Test cases for dumpinfo and recordtypes."""

    def test_dumpinfo_prints_first_event_per_type(self, events):
        reader = MemoryRecordingReader([
            events.jvm_info(1, "first"),
            events.jvm_info(2, "second"),
            events.sample(3, ["a.B.c"]),
        ])
        out = io.StringIO()

        produced = get_report_action("dumpinfo").run(
            ActionContext(reader=reader, config=ReportConfig(), stdout=out)
        )

        assert produced == []
        text = out.getvalue()
        assert text.count("JVM Information") == 1
        assert "first" in text
        assert "second" not in text

    def test_recordtypes_pads_columns(self, events):
        reader = MemoryRecordingReader(
            [events.sample(1, ["a.B.c"])],
            event_types=[EventType("CPU Load", "os/processor/cpu_load", "OS CPU load")],
        )
        out = io.StringIO()

        get_report_action("recordtypes").run(ActionContext(reader=reader, config=ReportConfig(), stdout=out))

        assert out.getvalue() == f"{'CPU Load'.ljust(33)}{'os/processor/cpu_load'.ljust(33)}OS CPU load\n"


@pytest.mark.unit
class TestReportRunner:
    """Test cases for window-by-window execution."""

    def windowed_reader(self, events, app_stack):
        # Ten samples in each of the first and the third 10s window, none in the second.
        recorded = events.samples(app_stack, 10, start=0, step=SECOND // 10)
        recorded += events.samples(app_stack, 10, start=21 * SECOND, step=SECOND // 10)
        recorded.append(events.sample(29 * SECOND, ["x.Y.z"]))
        return MemoryRecordingReader(recorded)

    def windowed_config(self, parallel=1):
        return ReportConfig(
            window=WindowConfig(duration=10),
            execution=ExecutionConfig(max_parallel_windows=parallel),
        )

    def test_windows(self, events, app_stack):
        runner = ReportRunner(self.windowed_reader(events, app_stack), self.windowed_config())

        assert [window.number for window in runner.windows()] == [1, 2, 3]

    @pytest.mark.parametrize("parallel", [1, 3])
    def test_results_in_window_order(self, events, app_stack, parallel):
        runner = ReportRunner(self.windowed_reader(events, app_stack), self.windowed_config(parallel))

        results = list(runner.run_windows(process_window))

        assert [result.window.number for result in results] == [1, 2, 3]
        assert [result.total_samples for result in results] == [10, 0, 10]

    def test_empty_window_files_removed(self, events, app_stack, temp_dir):
        messages = []
        runner = ReportRunner(
            self.windowed_reader(events, app_stack), self.windowed_config(), messages.append
        )

        def write_counts(result, output_file):
            output_file.write_text("".join(f"{k} {v}\n" for k, v in result.stack_counts.items()))

        produced = runner.handle_recording_by_window_by_file(
            temp_dir / "out.txt", process_window, write_counts
        )

        assert produced == [temp_dir / "out.txt", temp_dir / "out.3.txt"]
        assert messages == produced
        assert runner.written_files == produced
        assert not (temp_dir / "out.2.txt").exists()

    def test_parquet_export(self, events, app_stack, temp_dir):
        config = replace(self.windowed_config(), storage=replace(ReportConfig().storage, export_format="parquet"))
        runner = ReportRunner(self.windowed_reader(events, app_stack), config)

        def write_counts(result, output_file):
            output_file.write_text("".join(f"{k} {v}\n" for k, v in result.stack_counts.items()))

        runner.handle_recording_by_window_by_file(temp_dir / "out.txt", process_window, write_counts)

        assert (temp_dir / "out.txt.parquet").exists()
        assert (temp_dir / "out.3.txt.parquet").exists()
        assert not (temp_dir / "out.2.txt.parquet").exists()
