"""
Example client: unlock the premium endpoint with an already-broadcast
Stacks transaction.

Usage: TX_ID=0x... python examples/python/client/main.py
"""

import asyncio
import json
import logging
import os
from pathlib import Path

import httpx
from dotenv import load_dotenv

from x402_stacks import format_amount, get_token_by_address
from x402_stacks.encoding import decode_payment_payload, encode_payment_payload

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

TX_ID = os.getenv("TX_ID", "")
RESOURCE_URL = "http://localhost:8000/premium"


async def main():
    async with httpx.AsyncClient(timeout=60.0) as client:
        response = await client.get(RESOURCE_URL)
        if response.status_code != 402:
            print(f"Unexpected status {response.status_code}: {response.text}")
            return

        requirements = response.json()["paymentRequirements"]
        symbol = get_token_by_address(requirements["token"]) or requirements["token"]
        print("Payment required:")
        print(f"  Pay {format_amount(requirements['amount'], symbol)} {symbol}")
        print(f"  To  {requirements['recipient']} on {requirements['network']}")

        if not TX_ID:
            print("\nBroadcast the payment, then rerun with TX_ID set.")
            return

        header = encode_payment_payload({"txId": TX_ID, "token": requirements["token"]})
        response = await client.get(RESOURCE_URL, headers={"X-PAYMENT": header})
        print(f"\nStatus: {response.status_code}")
        print(json.dumps(response.json(), indent=2))

        payment_response = response.headers.get("X-PAYMENT-RESPONSE")
        if payment_response:
            print(f"Settlement: {decode_payment_payload(payment_response)}")


if __name__ == "__main__":
    asyncio.run(main())
