"""
Facilitator Main Entry Point
Starts a FastAPI server exposing Stacks payment verification over HTTP.
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from x402_stacks import NetworkConfig, StacksFacilitator
from x402_stacks.logging_config import setup_logging
from x402_stacks.types import Payment, SettleResponse, SupportedToken, VerifyResponse

load_dotenv(Path(__file__).parent / ".env")
load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

setup_logging()

FACILITATOR_HOST = "0.0.0.0"
FACILITATOR_PORT = 8001

app = FastAPI(
    title="X402 Stacks Facilitator",
    description="Facilitator service for X402 payments on Stacks",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

facilitator = StacksFacilitator()


@app.get("/")
async def root():
    """Service info endpoint"""
    return {
        "service": "X402 Stacks Facilitator",
        "status": "running",
        "networks": facilitator.supported_networks,
    }


@app.get("/supported")
async def supported():
    """Get supported networks and tokens"""
    return {
        "networks": facilitator.supported_networks,
        "tokens": facilitator.supported_tokens,
    }


@app.get("/tokens/{network}", response_model=list[SupportedToken])
async def tokens(network: str):
    """Get supported tokens for a network"""
    return facilitator.get_tokens(network)


@app.post("/verify", response_model=VerifyResponse, response_model_by_alias=True)
async def verify(payment: Payment):
    """Verify that a broadcast transaction satisfies the payment"""
    return await facilitator.verify(payment)


@app.post("/settle", response_model=SettleResponse, response_model_by_alias=True)
async def settle(payment: Payment):
    """Settle a payment (verification is settlement on Stacks)"""
    return await facilitator.settle(payment)


def main():
    """Start the facilitator server"""
    print("\n" + "=" * 80)
    print("Starting X402 Stacks Facilitator Server")
    print("=" * 80)
    print(f"Host: {FACILITATOR_HOST}")
    print(f"Port: {FACILITATOR_PORT}")
    for network in facilitator.supported_networks:
        print(f"Network: {network} -> {NetworkConfig.get_api_url(network)}")
    print("=" * 80)
    print("\nEndpoints:")
    print(f"  GET  http://{FACILITATOR_HOST}:{FACILITATOR_PORT}/")
    print(f"  GET  http://{FACILITATOR_HOST}:{FACILITATOR_PORT}/supported")
    print(f"  GET  http://{FACILITATOR_HOST}:{FACILITATOR_PORT}/tokens/{{network}}")
    print(f"  POST http://{FACILITATOR_HOST}:{FACILITATOR_PORT}/verify")
    print(f"  POST http://{FACILITATOR_HOST}:{FACILITATOR_PORT}/settle")
    print("=" * 80 + "\n")

    uvicorn.run(
        app,
        host=FACILITATOR_HOST,
        port=FACILITATOR_PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
