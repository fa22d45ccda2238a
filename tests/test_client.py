from urllib.parse import parse_qsl, urlsplit

import pytest
import responses

from bybitclient.client import BybitClient
from bybitclient.errors import ApiError, HttpError, JsonError, MissingFieldError
from bybitclient.params import AnnouncementParams, KlineParams, SystemStatusParams

BASE = "https://api.example.com"


def _ok(result):
    return {"retCode": 0, "retMsg": "OK", "result": result}


def _query(call):
    return parse_qsl(urlsplit(call.request.url).query)


@pytest.fixture
def client():
    return BybitClient(BASE + "/")


def test_announcements_success_and_query(client):
    announcement = {
        "title": "Hello",
        "description": "d",
        "type": {"title": "News", "key": "latest_bybit_news"},
        "tags": [],
        "url": "https://example.com/a",
    }
    params = AnnouncementParams("en-US", type_key="latest_bybit_news", page=1)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/announcements/index", json=_ok({"total": 1, "list": [announcement]}))
        result = client.get_announcements(params)
        assert _query(rsps.calls[0]) == params.to_query()
    assert result.total == 1
    assert result.list[0].title == "Hello"
    assert result.list[0].date_timestamp is None


def test_market_time_uses_default_base_url():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "https://api.bybit.com/v5/market/time",
            json=_ok({"timeSecond": "1700000000", "timeNano": "1700000000123456789"}),
        )
        result = BybitClient().get_market_time()
    assert result.time_second == "1700000000"
    assert result.time_nano == "1700000000123456789"


def test_kline_query_and_result(client):
    params = KlineParams("BTCUSDT", "60", category="spot", limit=10)
    rows = [["1700000000000", "1", "2", "0.5", "1.5", "10", "15"]]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/kline", json=_ok({"category": "spot", "symbol": "BTCUSDT", "list": rows}))
        result = client.get_kline(params)
        assert _query(rsps.calls[0]) == params.to_query()
    assert result.list == rows


def test_system_status(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/system/status", json=_ok({"list": []}))
        result = client.get_system_status(SystemStatusParams(state="completed"))
        assert _query(rsps.calls[0]) == [("state", "completed")]
    assert result.list == []


def test_api_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/time", json={"retCode": 10001, "retMsg": "params error"})
        with pytest.raises(ApiError) as info:
            client.get_market_time()
    assert info.value.code == 10001
    assert info.value.msg == "params error"


def test_missing_result(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/time", json={"retCode": 0, "retMsg": "OK", "result": None})
        with pytest.raises(MissingFieldError) as info:
            client.get_market_time()
    assert info.value.field == "result"


def test_malformed_result_is_json_error_even_on_api_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/time", json={"retCode": 10001, "retMsg": "bad", "result": {}})
        with pytest.raises(JsonError):
            client.get_market_time()


def test_invalid_json(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/time", body="not json")
        with pytest.raises(JsonError):
            client.get_market_time()


def test_http_status_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/v5/market/time", status=503, body="down")
        with pytest.raises(HttpError):
            client.get_market_time()


def test_connection_error(client):
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        with pytest.raises(HttpError):
            client.get_market_time()