"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from spotipi.config.settings import CatalogSettings
from spotipi.features.catalog import CatalogBuildError, Track
from spotipi.ui.cli import CommandProcessor
from spotipi.ui.cli.args.options import ScanArgs, StartArgs
from spotipi.ui.cli.commands import ScanCommand, StartCommand


@pytest.fixture
def settings(tmp_path: Path) -> CatalogSettings:
    return CatalogSettings(music_dir=tmp_path)


@pytest.fixture
def mock_process_args(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("spotipi.ui.cli.cli.ArgumentParser.process_args")


def _scan_args(settings: CatalogSettings, as_json: bool = False) -> ScanArgs:
    return ScanArgs(command="scan", settings=settings, as_json=as_json, verbose=False, quiet=False)


def test_start_runs_uvicorn(
    mocker: MockerFixture, mock_process_args: MagicMock, settings: CatalogSettings
) -> None:
    mock_process_args.return_value = StartArgs(
        command="start", host="127.0.0.1", port=8123, settings=settings, verbose=False, quiet=False
    )
    mock_run = mocker.patch("spotipi.ui.cli.commands.start.uvicorn.run")

    CommandProcessor.process_command(["start", "8123"])

    mock_run.assert_called_once()
    assert mock_run.call_args.kwargs["port"] == 8123
    assert mock_run.call_args.kwargs["host"] == "127.0.0.1"


def test_scan_success(
    mocker: MockerFixture, mock_process_args: MagicMock, settings: CatalogSettings
) -> None:
    mock_process_args.return_value = _scan_args(settings, as_json=True)
    mock_build = mocker.patch(
        "spotipi.features.catalog.TrackCatalogBuilder.build",
        return_value=[Track.fallback("a.mp3", "/music")],
    )
    mock_show_json = mocker.patch("spotipi.ui.cli.commands.scan.CatalogDisplay.show_json")

    CommandProcessor.process_command(["scan", "--json"])

    mock_build.assert_called_once_with(settings.music_dir)
    mock_show_json.assert_called_once()


def test_scan_directory_error_exits_one(
    mocker: MockerFixture, mock_process_args: MagicMock, settings: CatalogSettings
) -> None:
    mock_process_args.return_value = _scan_args(settings)
    _ = mocker.patch(
        "spotipi.features.catalog.TrackCatalogBuilder.build",
        side_effect=CatalogBuildError(settings.music_dir),
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["scan"])

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(mock_process_args: MagicMock) -> None:
    mock_process_args.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["start"])

    assert excinfo.value.code == 130


def test_unexpected_error_exits_one(mock_process_args: MagicMock) -> None:
    mock_process_args.side_effect = RuntimeError("boom")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["scan"])

    assert excinfo.value.code == 1


def test_scan_command_prints_table(settings: CatalogSettings, mocker: MockerFixture) -> None:
    command = ScanCommand(_scan_args(settings))
    mock_show = mocker.patch.object(command.display, "show_tracks")

    assert command.execute() == 0
    mock_show.assert_called_once_with([], quiet=False)


def test_start_command_passes_builder_to_app(
    settings: CatalogSettings, mocker: MockerFixture
) -> None:
    args = StartArgs(
        command="start", host="0.0.0.0", port=9000, settings=settings, verbose=True, quiet=False
    )
    mock_create_app = mocker.patch("spotipi.ui.cli.commands.start.create_app")
    mock_run = mocker.patch("spotipi.ui.cli.commands.start.uvicorn.run")
    command = StartCommand(args)

    assert command.execute() == 0
    mock_create_app.assert_called_once_with(settings, command.builder)
    assert mock_run.call_args.kwargs["log_level"] == "debug"
