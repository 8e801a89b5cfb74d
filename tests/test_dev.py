"""
Tests for the development probe script.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

import dev


def fake_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    response.text = text
    return response


class TestDevChecks:
    def test_health_ok(self):
        with patch("dev.requests.get", return_value=fake_response(payload={"status": "healthy"})) as get:
            assert dev.check_health("http://svc:3000") is True
        get.assert_called_once_with("http://svc:3000/health", timeout=5)

    def test_health_connection_error(self):
        with patch("dev.requests.get", side_effect=requests.exceptions.ConnectionError("refused")):
            assert dev.check_health("http://svc:3000") is False

    def test_status_page_requires_banner(self):
        with patch("dev.requests.get", return_value=fake_response(text="<html>nope</html>")):
            assert dev.check_status_page("http://svc:3000") is False
        with patch("dev.requests.get", return_value=fake_response(text="Application Running Successfully")):
            assert dev.check_status_page("http://svc:3000") is True

    def test_wait_gives_up(self):
        with patch("dev.requests.get", side_effect=requests.exceptions.ConnectionError("refused")), \
                patch("dev.time.sleep") as sleep:
            assert dev.wait_for_server("http://svc:3000", max_attempts=3) is False
        assert sleep.call_count == 3


class TestDevMain:
    def test_no_command_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            dev.main([])
        assert exc_info.value.code == 1

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            dev.main(["deploy"])
        assert exc_info.value.code == 1

    def test_check_fails_when_any_probe_fails(self):
        with patch("dev.check_health", return_value=True), \
                patch("dev.check_server_info", return_value=False), \
                patch("dev.check_status_page", return_value=True):
            with pytest.raises(SystemExit) as exc_info:
                dev.main(["check", "http://svc:3000/"])
        assert exc_info.value.code == 1

    def test_info_uses_base_url(self):
        with patch("dev.check_server_info", return_value=True) as check:
            dev.main(["info", "http://svc:3000/"])
        check.assert_called_once_with("http://svc:3000")
