"""HTTP API client for the Livecoin exchange.

This module provides the main LivecoinApiClient class for interacting with the
Livecoin REST API, including balances, market data and order operations.
"""

import logging
from time import time_ns

from livecoin_net.client import LivecoinClient
from livecoin_net.errors import (
    ApiError,
    DeserializationError,
    UnexpectedResponseShape,
)
from livecoin_net.executors import HttpExecutor
from livecoin_net.helpers import (
    DEFAULT_API_URL,
    create_list_with,
    create_with,
    deserialize_response,
)
from livecoin_net.types import (
    Balance,
    CancelledOrder,
    Json,
    LivecoinNumericInput,
    NewOrder,
    OrderBook,
    OrderBookLevel,
    OrderId,
    OrderInfo,
    Params,
    Restriction,
    Restrictions,
    Trade,
    Transaction,
    full_precision_string,
    wire_decimal,
)

log = logging.getLogger(__name__)

ALL_CURRENCY_PAIRS = "all"
NO_TRADES_EXCEPTION = "Data not found"


def raise_embedded_error(response: Json) -> None:
    """Raise the error Livecoin embeds in a response body, if any.

    Livecoin often answers failed calls with status 200 or 400 and a body such
    as ``{"success": false, "errorMessage": "..."}``. Arrays never carry an
    error.

    Args:
        response: The decoded response body

    Raises:
        ApiError: If the body is an object with a non-empty ``errorMessage``
        UnexpectedResponseShape: If the body is neither an object nor an array

    """
    if isinstance(response, dict):
        error_message = response.get("errorMessage")
        if isinstance(error_message, str) and error_message:
            raise ApiError(error_message)
        return

    if isinstance(response, list):
        return

    raise UnexpectedResponseShape(
        f"Unrecognized response type {type(response).__name__}"
    )


def _order_book_levels(rows: Json) -> list[OrderBookLevel]:
    if not isinstance(rows, list):
        raise TypeError(f"Expected a JSON array, got {type(rows).__name__}")
    return [
        OrderBookLevel(price=wire_decimal(row[0]), quantity=wire_decimal(row[1]))  # type: ignore
        for row in rows
    ]


class LivecoinApiClient:
    """Livecoin API client for account and trading operations.

    Examples:
        .. code-block:: python

            from livecoin_net import LivecoinApiClient
            from dotenv import load_dotenv
            import os

            load_dotenv()

            livecoin = LivecoinApiClient(
                api_key=os.environ.get('LIVECOIN_API_KEY', "your-api-key"),
                api_secret=os.environ.get('LIVECOIN_API_SECRET', "your-api-secret"),
            )

            for balance in livecoin.get_balances():
                print(f"{balance.currency} {balance.type}: {balance.value}")

            print(livecoin.get_restrictions())
    """

    _client: LivecoinClient

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        api_url: str = DEFAULT_API_URL,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Livecoin API client.

        Args:
            api_key: Your API key (required for every endpoint except restrictions)
            api_secret: Your API secret, used to sign requests
            api_url: Base URL for the Livecoin API (default: production URL)
            executor: Custom HTTP executor (optional, uses default if not provided)
            timeout: Seconds to wait for each response. Defaults to the
                executor's timeout when it has one, otherwise 30 seconds.

        """
        self._client = LivecoinClient(
            api_key=api_key,
            api_secret=api_secret,
            api_url=api_url,
            executor=executor,
            timeout=timeout,
        )

    @property
    def debug(self) -> bool:
        """Whether full request and response dumps are logged."""
        return self._client.debug

    @property
    def timeout(self) -> float:
        """Seconds to wait for each response."""
        return self._client.timeout

    def set_debug(self, enable: bool) -> None:
        """Enable or disable logging of full request and response dumps.

        Dumps are logged at INFO level on the ``livecoin_net.client`` logger.
        """
        self._client.debug = enable

    def set_timeout(self, timeout: float | None) -> None:
        """Set the response timeout in seconds; unset or non-positive means 30s."""
        self._client.set_timeout(timeout)

    ### ===================================================== Account API =====================================================

    def get_balances(self) -> list[Balance]:
        """Get all balances of the account.

        Returns:
            list[Balance]: One entry per currency and balance type

        Raises:
            MissingCredentialsError: If the API key or secret is not set
            ApiError: If the exchange reports an error
            DeserializationError: If the API response cannot be parsed

        Endpoint:
            GET /payment/balances

        """
        response = self.__send_request("GET", "payment/balances", auth_needed=True)
        try:
            result = create_list_with(Balance, response)
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    def get_balance(self, currency: str) -> Balance:
        """Get the available balance for one currency.

        Args:
            currency: The currency code (e.g. "BTC"), case-insensitive

        Returns:
            Balance: The balance record

        Endpoint:
            GET /payment/balance

        """
        response = self.__send_request(
            "GET",
            "payment/balance",
            {"currency": currency.upper()},
            auth_needed=True,
        )
        try:
            result = create_with(Balance, response)  # type: ignore
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    def get_transactions(self, start: int, end: int = 0) -> list[Transaction]:
        """Get deposit and withdrawal history.

        Args:
            start: Range start, UNIX timestamp in milliseconds
            end: Range end, UNIX timestamp in milliseconds (0 means now)

        Returns:
            list[Transaction]: Deposits and withdrawals in the range

        Endpoint:
            GET /payment/history/transactions

        """
        if end == 0:
            end = time_ns() // 1_000_000

        response = self.__send_request(
            "GET",
            "payment/history/transactions",
            {
                "types": "DEPOSIT,WITHDRAWAL",
                "start": str(start),
                "end": str(end),
            },
            auth_needed=True,
        )
        try:
            result = create_list_with(Transaction, response)
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    ### ===================================================== Market API =====================================================

    def get_order_book(self, currency_pair: str) -> OrderBook:
        """Get the orderbook for a currency pair.

        Args:
            currency_pair: The pair (e.g. "BTC/USD"), case-insensitive

        Returns:
            OrderBook: Ask and bid levels with price and quantity

        Endpoint:
            GET /exchange/order_book

        """
        response = self.__send_request(
            "GET",
            "exchange/order_book",
            {"currencyPair": currency_pair.upper()},
            auth_needed=True,
        )
        try:
            result = OrderBook(
                asks=_order_book_levels(response["asks"]),  # type: ignore
                bids=_order_book_levels(response["bids"]),  # type: ignore
                timestamp=response.get("timestamp"),  # type: ignore
            )
        except (TypeError, IndexError, KeyError, ValueError, AttributeError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    def get_trades(self, currency_pair: str = ALL_CURRENCY_PAIRS) -> list[Trade]:
        """Get the account's trade history.

        Livecoin answers ``{"exception": "Data not found"}`` instead of an
        empty array when there is no history; that answer yields an empty list.

        Args:
            currency_pair: The pair (e.g. "BTC/USD"), or "all" for every pair

        Returns:
            list[Trade]: Executed trades

        Endpoint:
            GET /exchange/trades

        """
        params: Params = {}
        if currency_pair != ALL_CURRENCY_PAIRS:
            params["currencyPair"] = currency_pair

        response = self.__send_request(
            "GET", "exchange/trades", params, auth_needed=True
        )
        if (
            isinstance(response, dict)
            and response.get("exception") == NO_TRADES_EXCEPTION
        ):
            return []

        try:
            result = create_list_with(Trade, response)
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    def get_restrictions(self) -> Restrictions:
        """Get the minimum order volume and the price scale of every pair.

        This endpoint does not require credentials.

        Returns:
            Restrictions: Minimum BTC volume and per-pair price scale

        Endpoint:
            GET /exchange/restrictions

        """
        response = self.__send_request(
            "GET", "exchange/restrictions", auth_needed=False
        )
        try:
            result = create_with(
                Restrictions,
                {
                    **response,  # type: ignore
                    "restrictions": create_list_with(
                        Restriction,
                        response["restrictions"],  # type: ignore
                    ),
                },
            )
        except (TypeError, KeyError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    ### ===================================================== Trade API =====================================================

    def sell_limit(
        self,
        currency_pair: str,
        quantity: LivecoinNumericInput,
        price: LivecoinNumericInput,
    ) -> NewOrder:
        """Place a limit sell order.

        Args:
            currency_pair: The pair (e.g. "BTC/USD")
            quantity: Amount to sell
            price: Limit price

        Returns:
            NewOrder: Placement confirmation with the new order ID

        Raises:
            ValidationError: If quantity or price is not a valid number

        Endpoint:
            POST /exchange/selllimit

        """
        return self.__place_limit_order(
            "exchange/selllimit", currency_pair, quantity, price
        )

    def buy_limit(
        self,
        currency_pair: str,
        quantity: LivecoinNumericInput,
        price: LivecoinNumericInput,
    ) -> NewOrder:
        """Place a limit buy order.

        Args:
            currency_pair: The pair (e.g. "BTC/USD")
            quantity: Amount to buy
            price: Limit price

        Returns:
            NewOrder: Placement confirmation with the new order ID

        Endpoint:
            POST /exchange/buylimit

        """
        return self.__place_limit_order(
            "exchange/buylimit", currency_pair, quantity, price
        )

    def cancel_order(self, currency_pair: str, order_id: OrderId | str) -> CancelledOrder:
        """Cancel a limit order.

        Args:
            currency_pair: The pair the order was placed on
            order_id: The order ID

        Returns:
            CancelledOrder: Cancellation result with filled and remaining quantities

        Endpoint:
            POST /exchange/cancellimit

        """
        response = self.__send_request(
            "POST",
            "exchange/cancellimit",
            {"currencyPair": currency_pair, "orderId": str(order_id)},
            auth_needed=True,
        )
        try:
            result = create_with(CancelledOrder, response)  # type: ignore
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    def get_order(self, order_id: OrderId | str) -> OrderInfo:
        """Get the details of an order.

        Args:
            order_id: The order ID

        Returns:
            OrderInfo: Order status, price and quantities

        Endpoint:
            GET /exchange/order

        """
        response = self.__send_request(
            "GET", "exchange/order", {"orderId": str(order_id)}, auth_needed=True
        )
        try:
            result = create_with(OrderInfo, response)  # type: ignore
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result

    """ Deferred helpers """

    def __send_request(
        self,
        method: str,
        resource: str,
        params: Params | None = None,
        auth_needed: bool = True,
    ) -> Json:
        """Send a request and decode the response body.

        Args:
            method: HTTP method (GET, POST, PUT)
            resource: The API resource path
            params: Request parameters
            auth_needed: Whether the request must be signed

        Returns:
            Json: The decoded response body, known not to carry an error

        Raises:
            DeserializationError: If the body is not valid JSON
            ApiError: If the body carries an ``errorMessage``
            UnexpectedResponseShape: If the body is neither an object nor an array

        """
        raw = self._client.do(method, resource, params, auth_needed)
        response = deserialize_response(raw, resource)
        raise_embedded_error(response)
        return response

    def __place_limit_order(
        self,
        resource: str,
        currency_pair: str,
        quantity: LivecoinNumericInput,
        price: LivecoinNumericInput,
    ) -> NewOrder:
        params: Params = {
            "currencyPair": currency_pair,
            "price": full_precision_string(price),
            "quantity": full_precision_string(quantity),
        }
        response = self.__send_request("POST", resource, params, auth_needed=True)
        try:
            result = create_with(NewOrder, response)  # type: ignore
        except (TypeError, ValueError) as e:
            raise DeserializationError(f"Received invalid response {response=}") from e
        return result
