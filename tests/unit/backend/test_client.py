"""Tests for backend error message extraction."""

import httpx

from timeline.core.modules.backend.client import _error_message


class TestErrorMessage:
    def test_error_field_used(self):
        assert _error_message(httpx.Response(401, json={"error": "Invalid email or password"})) == "Invalid email or password"

    def test_status_when_no_body(self):
        assert _error_message(httpx.Response(400)) == "HTTP 400"

    def test_status_when_not_json(self):
        assert _error_message(httpx.Response(502, text="<html>Bad Gateway</html>")) == "HTTP 502"

    def test_status_when_error_not_string(self):
        assert _error_message(httpx.Response(400, json={"error": {"code": 1}})) == "HTTP 400"

    def test_status_when_body_is_list(self):
        assert _error_message(httpx.Response(400, json=["bad"])) == "HTTP 400"
