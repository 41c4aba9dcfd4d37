# Tests for the pocketpaste command line

import io
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from pocketpaste.__main__ import (
    EXIT_NETWORK,
    EXIT_NOT_FOUND,
    EXIT_OK,
    EXIT_USAGE,
    build_parser,
    main,
)


@pytest.fixture(autouse=True)
def _quiet_logging():
    with patch("pocketpaste.__main__.setup_logging"):
        yield


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_post_file(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    src.write_text("some notes", encoding="utf-8")

    with patch(
        "pocketpaste.integrations.pastebin.PastebinClient.post",
        new_callable=AsyncMock,
        return_value="https://pastebin.com/AbCd1234",
    ) as mock_post:
        code = main(["post", str(src), "--privacy", "2", "--expiration", "1 day"])

    assert code == EXIT_OK
    assert capsys.readouterr().out.strip() == "https://pastebin.com/AbCd1234"
    text, options = mock_post.await_args.args
    assert text == "some notes"
    assert options.privacy == 2
    assert options.expiration == "1 day"


def test_post_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))

    with patch(
        "pocketpaste.integrations.pastebin.PastebinClient.post",
        new_callable=AsyncMock,
        return_value="https://pastebin.com/x",
    ) as mock_post:
        code = main(["post", "--name", "log"])

    assert code == EXIT_OK
    text, options = mock_post.await_args.args
    assert text == "from stdin"
    assert options.name == "log"


def test_post_invalid_privacy_makes_no_requests(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))

    with patch("pocketpaste.integrations.pastebin.PastebinClient.login") as mock_login:
        code = main(["post", "--privacy", "secret"])

    assert code == EXIT_USAGE
    mock_login.assert_not_called()


def test_get_found(capsys):
    with patch(
        "pocketpaste.integrations.pastebin.PastebinClient.get",
        new_callable=AsyncMock,
        return_value="raw body",
    ):
        code = main(["get", "abc123"])

    assert code == EXIT_OK
    assert capsys.readouterr().out == "raw body"


def test_get_missing():
    with patch(
        "pocketpaste.integrations.pastebin.PastebinClient.get",
        new_callable=AsyncMock,
        return_value=None,
    ):
        assert main(["get", "abc123"]) == EXIT_NOT_FOUND


def test_delete_not_implemented():
    assert main(["delete", "abc123"]) == EXIT_USAGE


def test_post_network_failure(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))

    with patch(
        "pocketpaste.integrations.pastebin.PastebinClient.post",
        new_callable=AsyncMock,
        side_effect=httpx.ConnectError("connection refused"),
    ):
        assert main(["post"]) == EXIT_NETWORK
