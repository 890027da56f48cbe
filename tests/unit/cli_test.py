"""Tests for the video-showcase CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from video_showcase.cli.app import app
from video_showcase.config import StreamSettings

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["serve"],
        ["serve", "api"],
        ["inspect"],
        ["inspect", "video"],
        ["inspect", "range"],
    ],
    ids=["root", "serve", "serve-api", "inspect", "inspect-video", "inspect-range"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


class TestInspectRange:
    def test_partial(self) -> None:
        result = runner.invoke(app, ["inspect", "range", "bytes=0-999", "--length", "10000"])
        assert result.exit_code == 0
        assert "206" in result.output
        assert "bytes 0-999/10000" in result.output

    def test_no_range(self) -> None:
        result = runner.invoke(app, ["inspect", "range", "items=0-1", "--length", "10"])
        assert result.exit_code == 0
        assert "no range requested" in result.output

    def test_unsatisfiable(self) -> None:
        result = runner.invoke(app, ["inspect", "range", "bytes=10000-10050", "--length", "10000"])
        assert result.exit_code == 1
        assert "bytes */10000" in result.output


class TestInspectVideo:
    def test_shows_descriptor(self, settings: StreamSettings, video_file: Path) -> None:
        result = runner.invoke(app, ["inspect", "video", "clip.mp4", "--storage-path", str(settings.storage_path)])
        assert result.exit_code == 0, result.output
        assert "10000" in result.output
        assert "video/mp4" in result.output

    def test_missing_video(self, settings: StreamSettings, video_file: Path) -> None:
        result = runner.invoke(app, ["inspect", "video", "nope.mp4", "--storage-path", str(settings.storage_path)])
        assert result.exit_code == 1

    def test_traversal(self, settings: StreamSettings, video_file: Path) -> None:
        result = runner.invoke(app, ["inspect", "video", "../../x", "--storage-path", str(settings.storage_path)])
        assert result.exit_code == 1


def test_serve_api_passes_settings_to_uvicorn(tmp_path: Path) -> None:
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(
            app, ["serve", "api", "--port", "9000", "--storage-path", str(tmp_path), "--log-level", "DEBUG"]
        )

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert kwargs["port"] == 9000
    assert kwargs["log_level"] == "debug"
    assert args[0].state.settings.storage_path == tmp_path
