import pytest

from bufficast import cli
from bufficast.application.pipeline import MISSING_CONFIG_MESSAGE
from bufficast.config import REQUIRED_ENV


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    # keep propagation on so other tests' caplog keeps working
    monkeypatch.setattr(cli, "setup_logging", lambda debug=False: None)


def test_no_quotes_exit_code(capsys):
    assert cli.main(["make me a podcast"]) == 2
    assert "No quoted messages" in capsys.readouterr().err


def test_missing_config_exit_code(monkeypatch, capsys):
    for key in REQUIRED_ENV:
        monkeypatch.delenv(key, raising=False)

    assert cli.main(['"eth denver is awesome", "gm"']) == 1

    out = capsys.readouterr().out
    assert "2 message(s)" in out
    assert MISSING_CONFIG_MESSAGE in out
