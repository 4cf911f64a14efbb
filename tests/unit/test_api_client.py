"""Unit tests for APIClient response handling over a mocked transport."""
import httpx
import pytest
from fb_fundraisers.errors import EncodingError, PlatformError, TransportError
from fb_fundraisers.services import APIClient, LoggerFunc


class _FailingStream(httpx.SyncByteStream):
    def __init__(self):
        self.closed = False

    def __iter__(self):
        raise httpx.ReadError("connection reset")

    def close(self) -> None:
        self.closed = True


class _TrackingStream(httpx.SyncByteStream):
    def __init__(self, data: bytes):
        self.data = data
        self.iterated = False
        self.closed = False

    def __iter__(self):
        self.iterated = True
        yield self.data

    def close(self) -> None:
        self.closed = True


def _client(handler, messages=None, debug=False) -> APIClient:
    logger = LoggerFunc(messages.append) if messages is not None else None
    return APIClient(
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        logger=logger,
        debug=debug,
    )


def test_transport_failure_is_wrapped_and_not_logged(params):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    messages = []
    with pytest.raises(TransportError) as exc_info:
        _client(handler, messages).create_fundraiser(params)
    assert "error transporting request" in exc_info.value.message
    assert messages == []


def test_read_failure_is_transport_error_and_response_is_released(params):
    stream = _FailingStream()
    messages = []
    with pytest.raises(TransportError) as exc_info:
        _client(lambda request: httpx.Response(200, stream=stream), messages).create_fundraiser(params)
    assert "error reading response" in exc_info.value.message
    assert stream.closed
    assert len(messages) == 1


def test_zero_content_length_skips_body_read(params):
    stream = _TrackingStream(b'{"id":"999"}')
    handler = lambda request: httpx.Response(200, headers={"Content-Length": "0"}, stream=stream)
    result = _client(handler).create_fundraiser(params)
    assert result.data == {}
    assert not stream.iterated
    assert stream.closed


def test_missing_content_length_still_reads_body(params):
    stream = _TrackingStream(b'{"error":{"code":100,"error_subcode":1366055}}')
    handler = lambda request: httpx.Response(400, stream=stream)
    with pytest.raises(PlatformError) as exc_info:
        _client(handler).create_fundraiser(params)
    assert exc_info.value.error_codes() == (100, 1366055)
    assert stream.iterated
    assert stream.closed


def test_success_response_is_released(params):
    stream = _TrackingStream(b'{"id":"42"}')
    result = _client(lambda request: httpx.Response(200, stream=stream)).create_fundraiser(params)
    assert result.fundraiser_id == "42"
    assert stream.closed


def test_failing_option_aborts_before_request(params):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"id": "1"})

    def broken_option(form):
        raise OSError("disk read failed")

    with pytest.raises(EncodingError) as exc_info:
        _client(handler).create_fundraiser(params, broken_option)
    assert isinstance(exc_info.value.__cause__, OSError)
    assert calls == []


def test_owned_http_client_is_closed():
    client = APIClient(timeout=5)
    client.close()
    assert client.http_client.is_closed


def test_borrowed_http_client_is_left_open():
    http_client = httpx.Client()
    with APIClient(http_client=http_client):
        pass
    assert not http_client.is_closed
    http_client.close()


@pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)])
def test_debug_defaults_to_environment_setting(monkeypatch, value, expected):
    from fb_fundraisers import config
    monkeypatch.setattr(config, "DEBUG", value)
    client = APIClient(http_client=httpx.Client())
    assert client.debug is expected
    client.http_client.close()
