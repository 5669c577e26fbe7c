"""
Tests for request description and default request logging.
"""

import logging

import httpx

from .interceptor import describeRequest, logRequest


class TestDescribeRequest:
    def test_json_body_decoded(self):
        request = httpx.Request(
            "post",
            "https://api.line.me/v2/bot/message/push",
            headers={"Authorization": "Bearer t"},
            json={"to": "U1", "messages": []},
        )

        description = describeRequest(request)

        assert description["method"] == "POST"
        assert description["url"] == "https://api.line.me/v2/bot/message/push"
        assert description["body"] == {"to": "U1", "messages": []}
        assert {k.lower(): v for k, v in description["headers"].items()}["authorization"] == "Bearer t"

    def test_binary_body_kept(self):
        request = httpx.Request("POST", "https://api.line.me/x", content=b"\x89PNG", headers={"Content-Type": "image/png"})
        assert describeRequest(request)["body"] == b"\x89PNG"

    def test_empty_body_is_none(self):
        request = httpx.Request("GET", "https://api.line.me/v2/bot/richmenu/list", params={"a": "1"})
        description = describeRequest(request)
        assert description["body"] is None
        assert description["url"] == "https://api.line.me/v2/bot/richmenu/list?a=1"

    def test_broken_json_body_kept_raw(self):
        request = httpx.Request(
            "POST", "https://api.line.me/x", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert describeRequest(request)["body"] == b"{not json"


class TestLogRequest:
    def test_masks_authorization(self, caplog):
        """Test default observer never logs the token, dood!"""
        request = httpx.Request(
            "POST",
            "https://api.line.me/v2/bot/message/push",
            headers={"Authorization": "Bearer secret_token"},
            json={"to": "U1"},
        )

        with caplog.at_level(logging.DEBUG, logger="lib.line_bot.interceptor"):
            logRequest(describeRequest(request))

        assert "LINE REQUEST: POST https://api.line.me/v2/bot/message/push" in caplog.text
        assert '"to":"U1"' in caplog.text
        assert "secret_token" not in caplog.text

    def test_binary_body_logged_as_size(self, caplog):
        request = httpx.Request("POST", "https://api.line.me/x", content=b"12345")

        with caplog.at_level(logging.DEBUG, logger="lib.line_bot.interceptor"):
            logRequest(describeRequest(request))

        assert "<5 bytes>" in caplog.text
