"""Solana RPC Gateway.

A small HTTP service that relays balance, account, block and airdrop
requests to a Solana JSON-RPC node and answers with plain JSON.
"""

__version__ = "0.1.0"
__author__ = "Solana Gateway Developers"
__email__ = "dev@example.com"
