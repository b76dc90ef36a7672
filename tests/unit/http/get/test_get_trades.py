from decimal import Decimal

import pytest

from livecoin_net.errors import ApiError, DeserializationError
from tests.mock_executors import MockSuccessfulOutput
from tests.unit.conftest import json_response, load_json_all_cases


@pytest.mark.parametrize("test_data", load_json_all_cases("response.trades"))
def test_get_trades(mock_http_client, test_data):
    payload, path = test_data
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.arg_pack[0] == "GET"
            and call.arg_pack[1]
            == "https://api.livecoin.net/exchange/trades?currencyPair=BTC%2FUSD",
        )
    )

    trades = client.get_trades("BTC/USD")

    assert len(trades) == len(payload)
    for trade, payload_trade in zip(trades, payload):
        assert trade.id == payload_trade["id"]
        assert trade.type == payload_trade["type"]
        assert trade.symbol == payload_trade["symbol"]
        assert trade.price == Decimal(str(payload_trade["price"]))
        assert trade.quantity == Decimal(str(payload_trade["quantity"]))
        assert trade.datetime == payload_trade["datetime"]
        assert trade.clientorderid == payload_trade["clientorderid"]


def test_get_trades_all_pairs_omits_currency_pair(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response([]),
            call_validation=lambda call: call.arg_pack[1]
            == "https://api.livecoin.net/exchange/trades",
        )
    )

    assert client.get_trades() == []


def test_get_trades_data_not_found_is_empty(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response({"success": False, "exception": "Data not found"})
        )
    )

    assert client.get_trades("BTC/USD") == []


def test_get_trades_other_exception_is_not_tolerated(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response({"success": False, "exception": "Unknown pair"})
        )
    )

    with pytest.raises(DeserializationError):
        client.get_trades("XXX/YYY")


def test_get_trades_error_message_wins_over_data_not_found(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(
                {"errorMessage": "Invalid signature", "exception": "Data not found"},
                status=400,
                reason="Bad Request",
            )
        )
    )

    with pytest.raises(ApiError) as exc_info:
        client.get_trades()

    assert exc_info.value.message == "Invalid signature"
