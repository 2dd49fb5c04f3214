"""Tests for the process entry point."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from airgradient_exporter.runner import run


class TestRun:
    """Tests for startup behavior of run()."""

    def test_missing_token_exits_before_binding(self, monkeypatch, capsys):
        """Without a token the process exits with status 1 and never binds."""
        monkeypatch.delenv("AIRGRADIENT_API_TOKEN", raising=False)

        with patch("airgradient_exporter.runner.create_server") as mock_create_server:
            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1
        mock_create_server.assert_not_called()
        assert "AIRGRADIENT_API_TOKEN environment variable is required" in capsys.readouterr().err

    def test_invalid_port_exits(self, monkeypatch, capsys):
        """An unparseable PORT also exits with status 1."""
        monkeypatch.setenv("AIRGRADIENT_API_TOKEN", "abc")
        monkeypatch.setenv("PORT", "http")

        with patch("airgradient_exporter.runner.create_server") as mock_create_server:
            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1
        mock_create_server.assert_not_called()
        assert "PORT" in capsys.readouterr().err

    def test_port_in_use_exits(self, monkeypatch, capsys):
        """A failed bind exits with status 1 instead of hanging."""
        monkeypatch.setenv("AIRGRADIENT_API_TOKEN", "abc")
        monkeypatch.setenv("PORT", "9123")

        with patch("airgradient_exporter.runner.create_server") as mock_create_server, \
             patch("airgradient_exporter.runner.signal"), \
             patch("airgradient_exporter.runner.threading") as mock_threading:
            mock_create_server.side_effect = OSError(98, "Address already in use")

            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1
        mock_threading.Thread.assert_not_called()
        assert "Address already in use" in capsys.readouterr().err

    def test_serves_with_configured_port(self, monkeypatch):
        """With valid configuration the app is served on HOST:PORT."""
        monkeypatch.setenv("AIRGRADIENT_API_TOKEN", "abc")
        monkeypatch.setenv("PORT", "9123")
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("WAITRESS_THREADS", "2")

        with patch("airgradient_exporter.runner.create_server") as mock_create_server, \
             patch("airgradient_exporter.runner.signal") as mock_signal, \
             patch("airgradient_exporter.runner.threading") as mock_threading:
            run()

            # Execute the server thread body synchronously
            target = mock_threading.Thread.call_args.kwargs["target"]
            target()

        assert mock_threading.Thread.call_args.kwargs["daemon"] is True
        mock_threading.Thread.return_value.start.assert_called_once()
        mock_threading.Event.return_value.wait.assert_called_once()
        assert mock_signal.signal.call_count == 2

        kwargs = mock_create_server.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9123
        assert kwargs["threads"] == 2

        server = mock_create_server.return_value
        server.run.assert_called_once()
        server.close.assert_called_once()

    def test_server_thread_failure_stops_process(self, monkeypatch):
        """If the server loop dies, the wait is released and the exit is non-zero."""
        monkeypatch.setenv("AIRGRADIENT_API_TOKEN", "abc")

        with patch("airgradient_exporter.runner.create_server") as mock_create_server, \
             patch("airgradient_exporter.runner.signal"), \
             patch("airgradient_exporter.runner.threading") as mock_threading:
            mock_create_server.return_value.run.side_effect = RuntimeError("loop died")

            # Run the server thread body when the main thread starts waiting
            def wait_for_server() -> None:
                mock_threading.Thread.call_args.kwargs["target"]()

            mock_threading.Event.return_value.wait.side_effect = wait_for_server

            with pytest.raises(SystemExit) as exc_info:
                run()

        assert exc_info.value.code == 1
        mock_threading.Event.return_value.set.assert_called_once()

    def test_logging_configured_before_app_is_built(self, monkeypatch):
        """Logging is set up before create_app so startup INFO lines are kept."""
        monkeypatch.setenv("AIRGRADIENT_API_TOKEN", "abc")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        calls = MagicMock()
        with patch("airgradient_exporter.runner.logging.basicConfig") as mock_basic_config, \
             patch("airgradient_exporter.runner.create_app") as mock_create_app, \
             patch("airgradient_exporter.runner.create_server"), \
             patch("airgradient_exporter.runner.signal"), \
             patch("airgradient_exporter.runner.threading"):
            calls.attach_mock(mock_basic_config, "basicConfig")
            calls.attach_mock(mock_create_app, "create_app")
            root_level = logging.getLogger().level
            try:
                run()
                applied_level = logging.getLogger().level
            finally:
                logging.getLogger().setLevel(root_level)

        assert [c[0] for c in calls.mock_calls] == ["basicConfig", "create_app"]
        assert mock_basic_config.call_args.kwargs["level"] == logging.INFO
        assert applied_level == logging.WARNING
