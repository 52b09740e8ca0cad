"""
Tests for decoders, results and response models.
"""

from dataclasses import FrozenInstanceError
from typing import Dict, List

import pytest

from frp_client import (
    Decoder,
    TEXT,
    JSON,
    model,
    Result,
    FailureKind,
    ServerInfo,
    ProxyTraffic,
    ClientStatus,
    ResponseDecodingError,
)
from frp_client.decoders import for_content_type, is_text_plain


class TestDecoders:

    def test_text_is_identity(self):
        assert TEXT('{"proxies":[]}') == '{"proxies":[]}'

    def test_text_empty(self):
        assert TEXT("") == ""
        assert TEXT("   ") == ""

    def test_json_parses(self):
        assert JSON('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_json_empty_is_none(self):
        assert JSON("\n") is None

    def test_json_error_is_wrapped(self):
        with pytest.raises(ResponseDecodingError) as exc:
            JSON("{not json")

        assert exc.value.body == "{not json"
        assert exc.value.message

    def test_model_with_generic_type(self):
        decoder = model(Dict[str, List[int]])

        assert decoder('{"in": [1, 2], "out": [3]}') == {"in": [1, 2], "out": [3]}
        assert decoder("") is None

    def test_model_type_mismatch(self):
        with pytest.raises(ResponseDecodingError):
            model(List[int])('["a", "b"]')

    def test_custom_decoder(self):
        lines = Decoder(decode=lambda text: text.splitlines(), empty=[], name="lines")

        assert lines("a\nb") == ["a", "b"]
        assert lines("") == []

    @pytest.mark.parametrize(
        "content_type, expected",
        [
            ("text/plain", True),
            ("TEXT/PLAIN", True),
            ("text/plain; charset=utf-8", True),
            ("application/json", False),
            ("", False),
        ],
    )
    def test_is_text_plain(self, content_type, expected):
        assert is_text_plain(content_type) is expected

    def test_for_content_type(self):
        assert for_content_type("text/plain") is TEXT
        assert for_content_type("application/toml") is JSON


class TestResult:

    def test_success(self):
        result = Result.success({"a": 1})

        assert result.is_success
        assert result
        assert result.data == {"a": 1}
        assert result.message is None
        assert result.kind is None

    def test_success_without_value(self):
        result = Result.success()

        assert result.is_success
        assert result.data is None

    def test_failure(self):
        result = Result.failure("Connection refused", FailureKind.TRANSPORT)

        assert not result.is_success
        assert not result
        assert result.data is None
        assert result.message == "Connection refused"
        assert not result.reached_server

    def test_failure_message_never_empty(self):
        result = Result.failure("", FailureKind.TIMEOUT)

        assert not result.is_success
        assert result.message == "timeout"

    def test_http_status_failure_reached_server(self):
        result = Result.failure("Client error '404 Not Found'", FailureKind.HTTP_STATUS, 404)

        assert result.reached_server
        assert result.status_code == 404

    def test_both_variants_rejected(self):
        with pytest.raises(ValueError):
            Result(value=1, message="x")

    def test_success_with_failure_kind_rejected(self):
        with pytest.raises(ValueError):
            Result(value=1, kind=FailureKind.TRANSPORT)

        with pytest.raises(ValueError):
            Result(status_code=500)

    def test_direct_failure_defaults_kind(self):
        result = Result(message="boom")

        assert result.kind is FailureKind.UNKNOWN
        assert repr(result) == "Result.failure('boom', kind=unknown)"

    def test_immutable(self):
        result = Result.success("x")

        with pytest.raises(FrozenInstanceError):
            result.value = "y"

    def test_repr(self):
        assert repr(Result.success("")) == "Result.success('')"
        assert "kind=http_status" in repr(Result.failure("bad", FailureKind.HTTP_STATUS))


class TestModels:

    def test_server_info(self):
        info = model(ServerInfo)(
            '{"version": "0.58.1", "bindPort": 7000, "vhostHTTPPort": 80,'
            ' "totalTrafficIn": 1024, "proxyTypeCount": {"tcp": 2}, "newField": 1}'
        )

        assert info.version == "0.58.1"
        assert info.bind_port == 7000
        assert info.vhost_http_port == 80
        assert info.total_traffic_in == 1024
        assert info.proxy_type_count == {"tcp": 2}
        assert info.newField == 1

    def test_proxy_traffic(self):
        traffic = model(ProxyTraffic)('{"name": "ssh", "trafficIn": [10, 0], "trafficOut": [5, 0]}')

        assert traffic.name == "ssh"
        assert traffic.traffic_in == [10, 0]
        assert traffic.traffic_out == [5, 0]

    def test_client_status(self):
        status = model(ClientStatus)(
            '{"tcp": [{"name": "ssh", "type": "tcp", "status": "running",'
            ' "local_addr": "127.0.0.1:22", "remote_addr": "1.2.3.4:6000"}],'
            ' "http": [{"name": "web", "type": "http", "status": "start error",'
            ' "err": "port unavailable"}]}'
        )

        names = [proxy.name for proxy in status.proxies()]
        assert names == ["ssh", "web"]
        assert status.root["http"][0].err == "port unavailable"
