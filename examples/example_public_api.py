"""
Public API Example

This example demonstrates the Livecoin endpoint that needs no credentials.
It reads the minimum order volume and the price precision of every pair.

Endpoints covered:
- Exchange restrictions (minimum BTC volume, per-pair price scale)
"""

import logging

from livecoin_net import LivecoinApiClient, get_version
from livecoin_net.helpers import print_data


def example_public_api() -> None:
    """Demonstrate the public restrictions endpoint without authentication."""

    print("=" * 70)
    print("Livecoin Public API Example")
    print("=" * 70)

    ver = get_version()
    print(f"\n[Info] Livecoin Python SDK Version: {ver}\n")

    print("[Setup] Initializing API client (no authentication needed)...")
    livecoin = LivecoinApiClient(timeout=10)

    # ==================================================================
    # RESTRICTIONS
    # ==================================================================
    print("\n" + "=" * 70)
    print("1. RESTRICTIONS")
    print("=" * 70)

    restrictions = livecoin.get_restrictions()
    print(f"\n[Restrictions] Minimum BTC volume: {restrictions.minBtcVolume}")
    print(f"[Restrictions] {len(restrictions.restrictions)} currency pairs")

    for restriction in restrictions.restrictions[:10]:
        print(f"  {restriction.currencyPair:<12} price scale {restriction.priceScale}")

    # ==================================================================
    # DEBUG DUMPS
    # ==================================================================
    print("\n" + "=" * 70)
    print("2. DEBUG DUMPS")
    print("=" * 70)

    # dumps are logged at INFO on livecoin_net.client
    logging.basicConfig(level=logging.INFO)
    livecoin.set_debug(True)
    print_data(livecoin.get_restrictions().restrictions[:3])
    livecoin.set_debug(False)

    print("\n" + "=" * 70)
    print("EXAMPLE COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    example_public_api()
