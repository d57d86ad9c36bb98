"""
Example: x402 payment gate with Stacks (sBTC)

Run: python examples/python/server/main.py
"""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from x402_stacks import STACKS_MAINNET, format_amount
from x402_stacks.fastapi import x402_protected
from x402_stacks.logging_config import setup_logging

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

# X402_LOG_LEVEL=DEBUG shows every verification step
setup_logging()
logging.getLogger("uvicorn.access").setLevel(logging.INFO)

logger = logging.getLogger(__name__)

# Your Stacks address to receive payments
PAY_TO_ADDRESS = os.getenv("PAY_TO_ADDRESS") or "SP2ZNGJ85ENDY6QRHQ5P2D4FXKGZWCKTB2T0Z55KS"
# Price: 0.0001 sBTC (10000 sats)
PRICE = "10000"
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8000

app = FastAPI(title="X402 Stacks Server", description="Protected resource server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.get("/")
async def root():
    """Service info"""
    return {
        "name": "x402 Stacks Example",
        "endpoints": {
            "/free": "Free endpoint",
            "/premium": f"Premium endpoint ({format_amount(PRICE, 'sBTC')} sBTC)",
        },
    }


@app.get("/free")
async def free():
    return {"message": "This is free!"}


@app.get("/premium")
@x402_protected(amount=PRICE, recipient=PAY_TO_ADDRESS, token="sBTC", network=STACKS_MAINNET)
async def premium(request: Request):
    """Serve premium content once the sBTC payment is verified"""
    logger.info("Serving premium content to %s", request.client.host if request.client else "unknown")
    return {
        "message": "Welcome to premium content!",
        "paymentVerified": True,
        "data": {
            "secret": "The answer is 42",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }


if __name__ == "__main__":
    import uvicorn

    print("\n" + "=" * 80)
    print("Starting X402 Stacks Resource Server")
    print("=" * 80)
    print(f"Host: {SERVER_HOST}")
    print(f"Port: {SERVER_PORT}")
    print(f"Pay To: {PAY_TO_ADDRESS}")
    print("Endpoints:")
    print("  /free    - Free")
    print(f"  /premium - {format_amount(PRICE, 'sBTC')} sBTC")
    print("=" * 80 + "\n")

    uvicorn.run(
        app,
        host=SERVER_HOST,
        port=SERVER_PORT,
        log_level="info",
        access_log=True,
    )
