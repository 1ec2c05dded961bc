"""Tests for the listverify command line."""

import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from listverify import main

STATUS_BODY = "123|file.csv|yes|100|50|progress|1700000000|linkAll|linkOk"


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("EMAILLISTVERIFY_API_KEY", "env-key")
    monkeypatch.setattr("listverify.load_dotenv", lambda: None)
    return CliRunner()


def test_verify_email(runner, response):
    with patch("emaillistverify.client.requests.get") as mock_get:
        mock_get.return_value = response("ok")
        result = runner.invoke(main, ["a@example.com"])

    assert result.exit_code == 0, result.output
    assert "a@example.com" in result.output
    assert "ok" in result.output
    assert mock_get.call_args.kwargs["params"]["secret"] == "env-key"


def test_api_key_option_overrides_env(runner, response):
    with patch("emaillistverify.client.requests.get") as mock_get:
        mock_get.return_value = response("fail")
        result = runner.invoke(main, ["a@example.com", "--api-key", "flag-key"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.kwargs["params"]["secret"] == "flag-key"


def test_upload(runner, response, tmp_path):
    csv_path = tmp_path / "list.csv"
    csv_path.write_text("email\na@example.com\n")
    with patch("emaillistverify.client.requests.post") as mock_post:
        mock_post.return_value = response("42")
        result = runner.invoke(main, ["--upload", str(csv_path)])

    assert result.exit_code == 0, result.output
    assert "file id 42" in result.output


def test_status(runner, response):
    with patch("emaillistverify.client.requests.get") as mock_get:
        mock_get.return_value = response(STATUS_BODY)
        result = runner.invoke(main, ["--status", "123"])

    assert result.exit_code == 0, result.output
    assert "file.csv" in result.output
    assert "progress" in result.output
    assert "50/100 (50.0%)" in result.output
    # links only shown once finished
    assert "linkAll" not in result.output


def test_library_error_reported(runner, response):
    with patch("emaillistverify.client.requests.get") as mock_get:
        mock_get.return_value = response("key_not_valid")
        result = runner.invoke(main, ["a@example.com"])

    assert result.exit_code == 1
    assert "Invalid API Key" in result.output


def test_missing_key(runner, monkeypatch):
    monkeypatch.delenv("EMAILLISTVERIFY_API_KEY")
    result = runner.invoke(main, ["a@example.com"])
    assert result.exit_code == 1
    assert "API key is required" in result.output


@pytest.mark.parametrize("args", [[], ["a@example.com", "--status", "1"]])
def test_exactly_one_mode(runner, args):
    result = runner.invoke(main, args)
    assert result.exit_code == 2


@pytest.fixture
def package_logger():
    logger = logging.getLogger("emaillistverify")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_verbose_logs_requests_without_secret(runner, response, package_logger):
    with patch("emaillistverify.client.requests.get") as mock_get:
        mock_get.return_value = response("ok")
        result = runner.invoke(main, ["a@example.com", "--verbose"])

    assert result.exit_code == 0, result.output
    assert "GET https://apps.emaillistverify.com/api/verifyEmail" in result.output
    assert "env-key" not in result.output
    assert package_logger.isEnabledFor(logging.DEBUG)
    # urllib3 logs the full query string, secret included
    assert not logging.getLogger("urllib3").isEnabledFor(logging.DEBUG)
    assert logging.getLogger().level != logging.DEBUG
