"""Tests for the fabarch command line interface."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from typer.testing import CliRunner

from fabarch.cli import app
from fabarch.define import RouteType
from fabarch.reader import read_arch
from fabarch.report import format_echo

runner = CliRunner()


@pytest.fixture(autouse=True)
def keep_log_sinks(mocker: MockerFixture) -> MagicMock:
    """Stop the CLI from replacing the loguru sinks of the test session."""
    return mocker.patch("fabarch.cli.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("fabarch.cli.logger")


def test_check_valid(
    write_arch: Callable[[str], Path], minimal_arch: str, mock_logger: MagicMock
) -> None:
    """Test checking a valid architecture file."""
    result = runner.invoke(app, ["check", str(write_arch(minimal_arch))])

    assert result.exit_code == 0
    message = mock_logger.info.call_args_list[0].args[0]
    assert "is valid: 2 pin classes, 2 pins per clb" in message


def test_check_reports_skipped_lines(
    write_arch: Callable[[str], Path], minimal_arch: str, mock_logger: MagicMock
) -> None:
    result = runner.invoke(app, ["check", str(write_arch(minimal_arch + "Fs 3\n"))])

    assert result.exit_code == 0
    messages = [c.args[0] for c in mock_logger.info.call_args_list]
    assert "Skipped unknown keyword 'Fs' on line 12" in messages


def test_check_invalid(
    write_arch: Callable[[str], Path], minimal_arch: str, mock_logger: MagicMock
) -> None:
    """Test that a broken file exits with 1 and logs the error."""
    path = write_arch(minimal_arch.replace("io_rat 2", "io_rat two"))
    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "io_rat" in mock_logger.error.call_args.args[0]


def test_check_route_type_option(
    write_arch: Callable[[str], Path], minimal_arch: str
) -> None:
    """Test that detailed routing needs the routing fields."""
    path = write_arch(minimal_arch)
    assert runner.invoke(app, ["check", "-r", "detailed", str(path)]).exit_code == 1
    assert runner.invoke(app, ["check", "-r", "global", str(path)]).exit_code == 0


def test_check_route_type_from_environment(
    write_arch: Callable[[str], Path],
    minimal_arch: str,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FABARCH_ROUTE_TYPE", "detailed")
    result = runner.invoke(app, ["check", str(write_arch(minimal_arch))])
    assert result.exit_code == 1


def test_check_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "missing.arch")])
    assert result.exit_code == 2


def test_echo(
    write_arch: Callable[[str], Path], detailed_arch: str, tmp_path: Path
) -> None:
    """Test writing the echo file of a detailed architecture."""
    path = write_arch(detailed_arch)
    output = tmp_path / "k4.echo"
    result = runner.invoke(
        app, ["echo", str(path), "--route-type", "detailed", "--output", str(output)]
    )

    assert result.exit_code == 0
    assert output.read_text() == format_echo(read_arch(path, RouteType.DETAILED))
    assert "switch_block_type: SUBSET." in output.read_text()


def test_echo_file_from_env_file(
    write_arch: Callable[[str], Path], minimal_arch: str, tmp_path: Path
) -> None:
    """Test that the echo file location can come from a .env file."""
    output = tmp_path / "from_env.echo"
    env = tmp_path / ".env"
    env.write_text(f"FABARCH_ECHO_FILE={output}\n")

    result = runner.invoke(
        app, ["--env-file", str(env), "echo", str(write_arch(minimal_arch))]
    )

    assert result.exit_code == 0
    assert output.exists()


def test_grid(write_arch: Callable[[str], Path], minimal_arch: str) -> None:
    """Test sizing the device grid for a circuit."""
    result = runner.invoke(
        app, ["grid", str(write_arch(minimal_arch)), "--clbs", "100"]
    )
    assert result.exit_code == 0
    assert "nx: 10  ny: 10  pad slots: 80" in result.output


def test_grid_user_size(write_arch: Callable[[str], Path], minimal_arch: str) -> None:
    result = runner.invoke(
        app,
        ["grid", str(write_arch(minimal_arch)), "--clbs", "6", "--nx", "3", "--ny", "2"],
    )
    assert result.exit_code == 0
    assert "nx: 3  ny: 2  pad slots: 20" in result.output


def test_grid_too_small(
    write_arch: Callable[[str], Path], minimal_arch: str, mock_logger: MagicMock
) -> None:
    result = runner.invoke(
        app,
        ["grid", str(write_arch(minimal_arch)), "--clbs", "7", "--nx", "3", "--ny", "2"],
    )
    assert result.exit_code == 1
    assert "too small" in mock_logger.error.call_args.args[0]


def test_grid_needs_both_dimensions(
    write_arch: Callable[[str], Path], minimal_arch: str
) -> None:
    result = runner.invoke(
        app, ["grid", str(write_arch(minimal_arch)), "--clbs", "6", "--nx", "3"]
    )
    assert result.exit_code == 2


def test_verbose_sets_debug_level(
    write_arch: Callable[[str], Path], minimal_arch: str, keep_log_sinks: MagicMock
) -> None:
    runner.invoke(app, ["-v", "check", str(write_arch(minimal_arch))])
    keep_log_sinks.assert_called_once_with("DEBUG")


def test_grid_zero_aspect_ratio(
    write_arch: Callable[[str], Path], minimal_arch: str, mock_logger: MagicMock
) -> None:
    """Test that an explicit zero aspect ratio is rejected, not defaulted."""
    result = runner.invoke(
        app,
        ["grid", str(write_arch(minimal_arch)), "--clbs", "100", "--aspect-ratio", "0"],
    )
    assert result.exit_code == 1
    assert "Aspect ratio" in mock_logger.error.call_args.args[0]
    assert "nx:" not in result.output


def test_check_binary_file(tmp_path: Path, mock_logger: MagicMock) -> None:
    """Test that a file that is not UTF-8 text exits with 1."""
    path = tmp_path / "binary.arch"
    path.write_bytes(b"io_rat \xff\xfe\n")
    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "not a UTF-8 text file" in mock_logger.error.call_args.args[0]


def test_invalid_settings(
    write_arch: Callable[[str], Path],
    minimal_arch: str,
    monkeypatch: pytest.MonkeyPatch,
    mock_logger: MagicMock,
) -> None:
    """Test that invalid environment settings exit with 1."""
    monkeypatch.setenv("FABARCH_ASPECT_RATIO", "0")
    result = runner.invoke(app, ["check", str(write_arch(minimal_arch))])

    assert result.exit_code == 1
    assert "Invalid fabarch settings" in mock_logger.error.call_args.args[0]
