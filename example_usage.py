#!/usr/bin/env python3
"""
Basic usage examples for the Apaczka client library.

Credentials are read from the APACZKA_APP_ID and APACZKA_APP_SECRET
environment variables.
"""

import json
import logging
import os
import sys

from apaczka_client import ApaczkaClient, ApaczkaClientError


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.INFO)

    app_id = os.environ.get("APACZKA_APP_ID", "")
    app_secret = os.environ.get("APACZKA_APP_SECRET", "")

    print("=== Apaczka Client Basic Usage Examples ===\n")

    try:
        client = ApaczkaClient(app_id, app_secret)
    except ApaczkaClientError as e:
        print(f"Apaczka Client Error: {e}")
        print("Set APACZKA_APP_ID and APACZKA_APP_SECRET first.")
        sys.exit(1)

    with client:
        # Example 1: Request signing (no network)
        print("1. Building a signed request body...")
        body = client.build_request("orders/", {"page": 1, "limit": 10})
        print(f"   Body: {body}\n")

        # Example 2: Listing orders
        print("2. Listing orders...")
        result = client.orders(page=1, limit=5)
        if result is None:
            print("   ✗ Request failed (see log)")
        else:
            print(f"   ✓ {json.loads(result)}")
        print()

        # Example 3: Available services
        print("3. Fetching service structure...")
        result = client.service_structure()
        if result is None:
            print("   ✗ Request failed (see log)")
        else:
            print(f"   ✓ Received {len(result)} characters")
        print()

        # Example 4: Pickup hours
        print("4. Fetching pickup hours for 00-001...")
        result = client.pickup_hours("00-001")
        if result is None:
            print("   ✗ Request failed (see log)")
        else:
            print(f"   ✓ {result}")


if __name__ == "__main__":
    main()
