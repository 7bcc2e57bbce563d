"""
Window-by-window report execution.

The runner schedules the windows of a recording, runs an aggregation pass
per window (optionally on a thread pool), names the output file of each
window, and keeps track of the files that were actually produced.
"""

import logging
from pathlib import Path
from typing import AbstractSet, Callable, Iterator, List, Optional

from ..executor import ManagedThreadPoolExecutor, ThreadPoolConfig
from ..models.config import ReportConfig
from ..models.events import FILTERED_EVENT_PATHS, Window
from ..models.results import InfoAccumulator, WindowResult
from ..output import create_new_file_name
from ..recording.base import RecordingReader
from ..storage import StackCountsExporter, create_storage
from ..windowing import iter_configured_windows

logger = logging.getLogger(__name__)

# (reader, window, config, accepted event types) -> WindowResult
WindowProcessor = Callable[
    [RecordingReader, Window, ReportConfig, Optional[AbstractSet[str]]], WindowResult
]
# (window result, output file of the window) -> None
WindowHandler = Callable[[WindowResult, Path], None]
OutputMessage = Callable[[Path], None]


class ReportRunner:
    """
    Runs a report over all configured windows of a recording.

    Attributes:
        info: Information events and counters merged over all windows so far
        written_files: Non-empty output files, in window order
    """

    def __init__(
        self,
        reader: RecordingReader,
        config: ReportConfig,
        output_message: Optional[OutputMessage] = None,
    ):
        self.reader = reader
        self.config = config
        self.output_message = output_message
        self.info = InfoAccumulator()
        self.written_files: List[Path] = []

        storage = create_storage(config.storage)
        self.exporter = StackCountsExporter(storage) if storage is not None else None

    def windows(self) -> List[Window]:
        return list(iter_configured_windows(self.reader.time_range, self.config.window))

    def run_windows(
        self,
        process_fn: WindowProcessor,
        accepted_event_types: Optional[AbstractSet[str]] = FILTERED_EVENT_PATHS,
    ) -> Iterator[WindowResult]:
        """
        Run ``process_fn`` on every window and yield the results in window order.

        With ``execution.max_parallel_windows`` above 1 the passes run on a
        managed thread pool; each pass owns its result, so nothing is shared
        between workers but the read-only reader and config.
        """
        windows = self.windows()
        workers = min(self.config.execution.max_parallel_windows, len(windows))
        logger.info(f"Processing {len(windows)} window(s) with {max(workers, 1)} worker(s)")

        if workers <= 1:
            for window in windows:
                yield process_fn(self.reader, window, self.config, accepted_event_types)
            return

        pool_config = ThreadPoolConfig.from_execution_config(self.config.execution)
        pool_config.max_workers = workers
        with ManagedThreadPoolExecutor(pool_config) as pool:
            futures = [
                pool.submit(process_fn, self.reader, window, self.config, accepted_event_types)
                for window in windows
            ]
            for future in futures:
                yield future.result()
            logger.debug(f"Window pool stats: {pool.get_stats()}")

    def handle_recording_by_window_by_file(
        self,
        output_file: Path,
        process_fn: WindowProcessor,
        handler: WindowHandler,
        accepted_event_types: Optional[AbstractSet[str]] = FILTERED_EVENT_PATHS,
    ) -> List[Path]:
        """
        Run a per-window report whose handler writes one file per window.

        Window 1 writes ``output_file``; later windows get the window number
        inserted before the extension. Empty files are removed once the
        handler returns.

        Returns:
            The non-empty files produced by this run
        """
        produced: List[Path] = []
        for result in self.run_windows(process_fn, accepted_event_types):
            self.info.merge(result.info)
            current_output_file = create_new_file_name(result.window.number, output_file)
            handler(result, current_output_file)

            if self._keep_output_file(current_output_file):
                produced.append(current_output_file)
                if self.exporter is not None:
                    self.exporter.export(result, current_output_file)
        return produced

    def _keep_output_file(self, output_file: Path) -> bool:
        if output_file.exists() and output_file.stat().st_size > 0:
            self.written_files.append(output_file)
            if self.output_message is not None:
                self.output_message(output_file)
            return True

        if output_file.exists():
            output_file.unlink()
            logger.debug(f"Removed empty output file {output_file}")
        return False

