import pytest

from caseless import HttpHeaders


class TestHttpHeaders:
    def test_lookup_any_casing(self, headers_target):
        headers = HttpHeaders(headers_target)
        assert headers["content-type"] == "json"
        assert headers["x-request-id"] == "abc"
        assert list(headers) == ["Content-Type", "X-Request-Id", "Accept"]

    def test_cast_booleans(self):
        headers = HttpHeaders({"X-Debug": "TRUE", "X-Cache": "false", "X-Other": "truthy"})
        assert headers["x-debug"] is True
        assert headers["x-cache"] is False
        assert headers["x-other"] == "truthy"

    def test_cast_nested(self):
        headers = HttpHeaders({"X-Flags": {"Enabled": "True", "Count": 3}})
        assert headers["x-flags"] == {"Enabled": True, "Count": 3}

    def test_default_empty(self):
        headers = HttpHeaders()
        headers["Authorization"] = "token"
        assert "AUTHORIZATION" in headers
        assert headers.target == {"Authorization": "token"}

    def test_copy_keeps_type(self):
        headers = HttpHeaders({"Accept": "*/*"})
        copied = headers.copy()
        assert isinstance(copied, HttpHeaders)
        assert copied["ACCEPT"] == "*/*"


if __name__ == "__main__":
    pytest.main([__file__])
