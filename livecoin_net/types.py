"""Type definitions for the Livecoin Python SDK.

This module contains type aliases, numeric conversion helpers and the
dataclasses returned by the API client. Field names follow the JSON keys
sent by the exchange so responses can be mapped directly onto them.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, List, TypeAlias

from livecoin_net.errors import ValidationError

# ============================================================================
# TYPE ALIASES
# ============================================================================

OrderId: TypeAlias = int

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray
# Livecoin answers with either an object or an array at the top level
Json: TypeAlias = JsonObject | JsonArray

# Request parameters are always sent as strings
Params: TypeAlias = dict[str, str]

LivecoinNumericInput: TypeAlias = Decimal | str | float | int


# ============================================================================
# NUMERIC CONVERSION UTILITIES
# ============================================================================

DECIMAL_PATTERN = re.compile(r"\d+(\.\d+)?")


def full_precision_string(n: LivecoinNumericInput) -> str:
    """Convert a numeric input to a full precision string representation."""
    if isinstance(n, str):
        if not DECIMAL_PATTERN.fullmatch(n):
            raise ValidationError(f"Invalid numeric input {n}")
        return n
    if isinstance(n, bool):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if isinstance(n, (int, float)):
        n = Decimal(str(n))
    if not isinstance(n, Decimal):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if not n.is_finite() or n < 0:
        raise ValidationError(f"Invalid numeric input {n}")
    return format(n, "f")


def wire_decimal(value: Any) -> Decimal | None:
    """Convert a JSON number or numeric string received from the exchange to Decimal.

    Floats go through ``str`` so the shortest round-tripping representation is
    kept instead of the binary expansion.

    Raises:
        ValueError: If the value is not numeric.

    """
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Expected a number, got {value!r}") from e
    raise ValueError(f"Expected a number, got {value!r}")


# ============================================================================
# ACCOUNT TYPES
# ============================================================================


@dataclass
class Balance:
    """Balance of one currency, split by balance type.

    ``type`` is one of ``total``, ``available``, ``trade`` or
    ``available_withdrawal``.
    """

    type: str
    currency: str
    value: Decimal


@dataclass
class Transaction:
    """Deposit or withdrawal record."""

    id: str
    type: str
    date: int
    amount: Decimal
    fee: Decimal
    fixedCurrency: str
    taxCurrency: str | None = field(default=None)
    variableAmount: Decimal | None = field(default=None)
    variableCurrency: str | None = field(default=None)
    external: str | None = field(default=None)
    login: str | None = field(default=None)


# ============================================================================
# MARKET DATA TYPES
# ============================================================================


@dataclass
class OrderBookLevel:
    """Single orderbook price level."""

    price: Decimal
    quantity: Decimal


@dataclass
class OrderBook:
    """Orderbook containing ask and bid levels."""

    asks: List[OrderBookLevel]
    bids: List[OrderBookLevel]
    timestamp: int | None = field(default=None)


@dataclass
class Trade:
    """Executed trade from the account's trade history."""

    id: int
    type: str
    symbol: str
    price: Decimal
    quantity: Decimal
    datetime: int
    commission: Decimal | None = field(default=None)
    clientorderid: int | None = field(default=None)


@dataclass
class Restriction:
    """Price precision for one currency pair."""

    currencyPair: str
    priceScale: int


@dataclass
class Restrictions:
    """Minimum order volume and per-pair price precision."""

    success: bool
    minBtcVolume: Decimal
    restrictions: List[Restriction]


# ============================================================================
# ORDER TYPES
# ============================================================================


@dataclass
class NewOrder:
    """Confirmation of a placed limit order."""

    success: bool
    added: bool
    orderId: OrderId | None = field(default=None)


@dataclass
class CancelledOrder:
    """Result of a cancellation request."""

    success: bool
    cancelled: bool
    exception: str | None = field(default=None)
    quantity: Decimal | None = field(default=None)
    tradeQuantity: Decimal | None = field(default=None)


@dataclass
class OrderInfo:
    """Details of a single order."""

    id: OrderId
    status: str
    symbol: str
    price: Decimal | None
    quantity: Decimal
    remaining_quantity: Decimal
    client_id: int | None = field(default=None)
    blocked: Decimal | None = field(default=None)
    blocked_remain: Decimal | None = field(default=None)
    commission_rate: Decimal | None = field(default=None)
    trades: Any = field(default=None)
