"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    clear_config_cache,
    sample_account,
    sample_block,
    airdrop_signature,
    mock_rpc_client,
)
