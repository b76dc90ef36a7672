"""
Authenticated REST API Example

This example demonstrates Livecoin's authenticated REST API endpoints.
These endpoints require valid API credentials and allow you to:

Account Information:
- Get all balances, or the balance of one currency
- Get deposit and withdrawal history
- Get the account's trade history

Market Data:
- Get the orderbook of a currency pair

Trading Operations:
- Place limit buy and sell orders (commented out for safety)
- Look up and cancel an order

Environment Variables Required:
- LIVECOIN_API_ENDPOINT_PRODUCTION: API endpoint URL (optional)
- LIVECOIN_API_KEY_PRODUCTION: Your API key
- LIVECOIN_API_SECRET_PRODUCTION: Your API secret
- LIVECOIN_TIMEOUT_PRODUCTION: Response timeout in seconds (optional)
"""

import time

from livecoin_net import ApiError, LivecoinApiClient
from livecoin_net.env_setup import setup_environment
from livecoin_net.helpers import print_data

CURRENCY_PAIR = "BTC/USD"


def example_auth_rest_api() -> None:
    """Demonstrate authenticated REST API endpoints for trading and account management."""

    print("=" * 70)
    print("Livecoin Authenticated REST API Example")
    print("=" * 70)

    print("\n[Setup] Loading credentials from environment...")
    api_endpoint, api_key, api_secret, timeout = setup_environment()
    print(f"[Setup] API Endpoint: {api_endpoint}\n")

    print("[Setup] Initializing authenticated API client...")
    livecoin = LivecoinApiClient(
        api_key=api_key,
        api_secret=api_secret,
        api_url=api_endpoint,
        timeout=timeout,
    )
    print(f"[Setup] Client initialized, timeout {livecoin.timeout}s\n")

    # ==================================================================
    # PART 1: ACCOUNT INFORMATION
    # ==================================================================
    print("=" * 70)
    print("PART 1: ACCOUNT INFORMATION")
    print("=" * 70)

    balances = livecoin.get_balances()
    print(f"\n[Balances] {len(balances)} entries")
    for balance in balances:
        if balance.value:
            print(f"  {balance.currency:<6} {balance.type:<22} {balance.value}")

    btc = livecoin.get_balance("btc")
    print(f"\n[Balance] Available BTC: {btc.value}")

    # last 30 days, in milliseconds
    start = int((time.time() - 30 * 24 * 3600) * 1000)
    transactions = livecoin.get_transactions(start)
    print(f"\n[Transactions] {len(transactions)} in the last 30 days")
    print_data(transactions[:5])

    trades = livecoin.get_trades()
    print(f"\n[Trades] {len(trades)} trades across all pairs")
    print_data(trades[:5])

    # ==================================================================
    # PART 2: MARKET DATA
    # ==================================================================
    print("\n" + "=" * 70)
    print("PART 2: MARKET DATA")
    print("=" * 70)

    orderbook = livecoin.get_order_book(CURRENCY_PAIR)
    print(f"\n[Orderbook] {CURRENCY_PAIR} at {orderbook.timestamp}")
    for level in orderbook.asks[:5]:
        print(f"  ask {level.price} x {level.quantity}")
    for level in orderbook.bids[:5]:
        print(f"  bid {level.price} x {level.quantity}")

    # ==================================================================
    # PART 3: TRADING OPERATIONS
    # ==================================================================
    print("\n" + "=" * 70)
    print("PART 3: TRADING OPERATIONS")
    print("=" * 70)
    print("\n  WARNING: Placed orders use real funds!")

    # UNCOMMENT THE FOLLOWING TO PLACE AND CANCEL A FAR-FROM-MARKET ORDER:
    # --------------------------------------------------------------------
    # best_bid = orderbook.bids[0].price
    # new_order = livecoin.buy_limit(CURRENCY_PAIR, "0.001", best_bid / 2)
    # print(f"\n[Order Placed] ID: {new_order.orderId}")
    #
    # order = livecoin.get_order(new_order.orderId)
    # print(f"[Order] {order.symbol} {order.status} {order.quantity} @ {order.price}")
    #
    # cancelled = livecoin.cancel_order(CURRENCY_PAIR, new_order.orderId)
    # print(f"[Order Cancelled] {cancelled.cancelled} {cancelled.exception or ''}")
    # --------------------------------------------------------------------

    try:
        livecoin.get_order(0)
    except ApiError as e:
        print(f"\n[Order Lookup] Exchange rejected order 0: {e.message}")

    print("\n" + "=" * 70)
    print("EXAMPLE COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    example_auth_rest_api()
