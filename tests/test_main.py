"""Tests for CLI argument handling in main.py."""
import logging
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from clipcast.main import main
from clipcast.main_logging import resolve_log_level
from clipcast.session_result import EndReason


class TestCLIArguments:
    """Tests for command-line argument validation."""

    def test_help_exits_with_code_0(self):
        """Test that --help exits cleanly and lists the modes."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "server" in result.output
        assert "client" in result.output
        assert "generate" in result.output

    def test_client_requires_host(self):
        runner = CliRunner()
        result = runner.invoke(main, ["client"])
        assert result.exit_code == 2
        assert "--host" in result.output

    def test_client_rejects_ping_interval_above_timeout(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["client", "--host", "devbox", "--ping-interval", "10", "--pong-timeout", "5"]
        )
        assert result.exit_code == 2
        assert "less than --pong-timeout" in result.output

    def test_client_rejects_unparsable_ssh_args(self):
        runner = CliRunner()
        result = runner.invoke(main, ["client", "--host", "devbox", "--ssh-args", "-o 'oops"])
        assert result.exit_code == 2
        assert "--ssh-args" in result.output

    def test_client_rejects_non_positive_interval(self):
        runner = CliRunner()
        result = runner.invoke(main, ["client", "--host", "devbox", "--poll-interval", "0"])
        assert result.exit_code == 2


class TestModes:
    """Tests that options reach the client and server entry points."""

    def test_client_builds_config_from_options(self):
        runner = CliRunner()
        with patch("clipcast.client.run_client", new_callable=AsyncMock) as mock_run:
            result = runner.invoke(
                main,
                [
                    "client",
                    "--host", "devbox",
                    "--ssh-args=-p 2222",
                    "--read-clipboard-cmd", "wl-paste",
                    "--remote-server-cmd", "~/bin/clipcast",
                    "--ping-interval", "2",
                    "--pong-timeout", "6",
                    "--reconnect-wait", "0.5",
                ],
            )

        assert result.exit_code == 0, result.output
        config = mock_run.call_args.args[0]
        assert config.host == "devbox"
        assert config.ssh_args == "-p 2222"
        assert config.read_clipboard_cmd == "wl-paste"
        assert config.write_clipboard_cmd == "pbcopy"
        assert config.remote_server_cmd == "~/bin/clipcast"
        assert config.reconnect_wait == 0.5
        assert config.session.ping_interval == 2.0
        assert config.session.pong_timeout == 6.0
        assert not config.session.send_ack

    def test_client_interrupt_exits_130(self):
        runner = CliRunner()
        with patch("clipcast.client.run_client", new_callable=AsyncMock) as mock_run:
            mock_run.side_effect = KeyboardInterrupt()
            result = runner.invoke(main, ["client", "--host", "devbox"])
        assert result.exit_code == 130

    def test_server_exits_0_when_client_disconnects(self):
        runner = CliRunner()
        with patch("clipcast.server.run_server", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = EndReason.CONNECTION_CLOSED
            result = runner.invoke(main, ["server", "--no-ack"])

        assert result.exit_code == 0
        config = mock_run.call_args.args[0]
        assert config.read_clipboard_cmd == "xclip -selection clipboard -o"
        assert config.write_clipboard_cmd == "xclip -selection clipboard"
        assert config.session.ping_interval is None
        assert not config.session.send_ack

    @pytest.mark.parametrize(
        "reason",
        [
            EndReason.PROTOCOL_ERROR,
            EndReason.SEND_TIMEOUT,
            EndReason.LIVENESS_TIMEOUT,
            EndReason.PROVIDER_FAILURE,
        ],
    )
    def test_server_exits_1_on_fatal_reason(self, reason):
        runner = CliRunner()
        with patch("clipcast.server.run_server", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = reason
            result = runner.invoke(main, ["server"])

        assert result.exit_code == 1
        assert reason.value in result.output


class TestGenerate:
    """Tests for shell completion output."""

    @pytest.mark.parametrize("shell", ["complete-bash", "complete-zsh", "complete-fish"])
    def test_generate_prints_script(self, shell):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", shell])
        assert result.exit_code == 0
        assert "_CLIPCAST_COMPLETE" in result.output

    def test_generate_rejects_unknown_shell(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "complete-tcsh"])
        assert result.exit_code == 2


class TestLogLevel:
    """Tests for CLIPCAST_LOG handling."""

    def test_default_is_info(self):
        assert resolve_log_level(False, None) == logging.INFO

    def test_env_selects_level(self):
        assert resolve_log_level(False, "debug") == logging.DEBUG
        assert resolve_log_level(False, "WARNING") == logging.WARNING
        assert resolve_log_level(False, " error ") == logging.ERROR

    def test_unknown_value_falls_back_to_info(self):
        assert resolve_log_level(False, "chatty") == logging.INFO

    def test_verbose_overrides_env(self):
        assert resolve_log_level(True, "error") == logging.DEBUG
