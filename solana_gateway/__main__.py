"""Command-line entry point for the Solana RPC gateway."""

from solana_gateway.server import run_server


def main():
    """Run the Solana RPC gateway."""
    run_server()


if __name__ == "__main__":
    main()
