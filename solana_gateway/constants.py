"""Constants used throughout the gateway."""

# 1 SOL = 10^9 lamports
LAMPORTS_PER_SOL = 1_000_000_000

# Default upstream endpoints
LOCAL_RPC_URL = "http://127.0.0.1:8899"
DEVNET_RPC_URL = "https://api.devnet.solana.com"

# Default listening address
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# Seconds between airdrop confirmation checks
DEFAULT_AIRDROP_POLL_INTERVAL = 0.5

# Block lookup settings
BLOCK_TRANSACTION_ENCODING = "base58"
BLOCK_MAX_SUPPORTED_TRANSACTION_VERSION = 0

COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")
