"""Tests for the command-line entry point."""

from unittest.mock import patch

from undoline import __main__ as cli
from undoline.settings import HistorySettings


def test_version_flag(capsys):
    with patch.object(cli, "get_version_string", return_value="1.2.3"):
        assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "1.2.3"


def test_version_unknown_when_not_installed():
    import importlib.metadata

    with patch("importlib.metadata.version", side_effect=importlib.metadata.PackageNotFoundError):
        assert cli.get_version_string() == "unknown"


def test_max_history_override():
    with patch.object(cli, "load_settings", return_value=HistorySettings()), \
         patch("undoline.textual_app.CounterApp") as app_class:
        assert cli.main(["--max-history", "7"]) == 0

    settings = app_class.call_args.kwargs["settings"]
    assert settings.max_history_length == 7
    app_class.return_value.run.assert_called_once_with()


def test_invalid_max_history(capsys):
    with patch.object(cli, "load_settings", return_value=HistorySettings()):
        assert cli.main(["--max-history", "zero"]) == 2
    assert "positive integer" in capsys.readouterr().err


def test_unknown_argument(capsys):
    with patch.object(cli, "load_settings", return_value=HistorySettings()):
        assert cli.main(["--frobnicate"]) == 2
    assert "Unknown arguments" in capsys.readouterr().err
