"""
Unit tests for the flame graph renderer invocation.
"""

import subprocess
from unittest.mock import Mock, patch

import pytest

from jfrreport.models import RendererConfig
from jfrreport.system import build_renderer_command, render_flame_graph
from jfrreport.validation import RendererError


@pytest.mark.unit
class TestRendererCommand:
    """Test cases for renderer command construction and execution."""

    def test_build_renderer_command(self):
        command = build_renderer_command(
            RendererConfig(command="/opt/flamegraph.pl", width=900), "Started x", "/tmp/in.txt"
        )

        assert command == ["/opt/flamegraph.pl", "--width", "900", "--title", "Started x", "/tmp/in.txt"]

    @patch("jfrreport.system.commands.subprocess.run")
    def test_render_redirects_stdout_to_output_file(self, mock_run, temp_dir):
        def fake_renderer(command, stdout, stderr, check):
            stdout.write(b"<svg/>")
            return Mock(returncode=0, stderr=b"")

        mock_run.side_effect = fake_renderer
        output_file = temp_dir / "out.svg"

        render_flame_graph(RendererConfig(), "title", temp_dir / "in.txt", output_file)

        assert output_file.read_bytes() == b"<svg/>"
        args, kwargs = mock_run.call_args
        assert args[0][0] == "flamegraph.pl"
        assert kwargs["stderr"] == subprocess.PIPE

    @patch("jfrreport.system.commands.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run, temp_dir):
        mock_run.return_value = Mock(returncode=2, stderr=b"bad input")

        with pytest.raises(RendererError) as exc_info:
            render_flame_graph(RendererConfig(), "title", temp_dir / "in.txt", temp_dir / "out.svg")

        assert exc_info.value.return_code == 2
        assert exc_info.value.stderr == "bad input"

    @patch("jfrreport.system.commands.subprocess.run")
    def test_missing_renderer_raises(self, mock_run, temp_dir):
        mock_run.side_effect = FileNotFoundError("flamegraph.pl")

        with pytest.raises(RendererError, match="not found"):
            render_flame_graph(RendererConfig(), "title", temp_dir / "in.txt", temp_dir / "out.svg")
