"""Configuration constants for tempo-autodeploy."""

BOT_VERSION = "3.0.0"

DEFAULT_NETWORK = "tempo-testnet"

# Network configuration
# default_rpc_env names the environment variable that overrides rpc_url
NETWORK_CONFIG = {
    "tempo-testnet": {
        "chain_id": 42429,
        "chain_name": "Tempo Testnet",
        "rpc_url": "https://rpc.testnet.tempo.xyz",
        "block_explorer_url": "https://explore.tempo.xyz",
        "default_rpc_env": "TEMPO_RPC_URL",
    },
}

CONTRACT_NAME = "MyContract"
CONTRACT_FILENAME = "MyContract.sol"
SOLC_VERSION = "0.8.20"

CONTRACT_SOURCE = """
pragma solidity ^0.8.20;

contract MyContract {
    string public message = "Hello Tempo!";

    event MessageUpdated(address indexed user, string newMessage);

    function setMessage(string calldata msg_) external {
        message = msg_;
        emit MessageUpdated(msg.sender, msg_);
    }
}
"""

MESSAGES = (
    "Hello Tempo",
    "GM Tempo",
    "GN Tempo",
    "Testing Tempo",
    "Done Tempo",
    "Success Tempo",
    "Deployed Tempo",
    "Started Tempo",
)

# Scheduling ranges (inclusive)
DEPLOY_COUNT_RANGE = (2, 4)
INTERVAL_HOURS_OPTIONS = (6, 12, 24)
INTERVAL_JITTER_SECONDS = 600
WALLET_DELAY_RANGE = (5, 30)
UPDATE_DELAY_RANGE = (2, 5)

# deploy_number = wallet_position * DEPLOY_NUMBER_STRIDE + attempt + 1
DEPLOY_NUMBER_STRIDE = 100

# Follow-up setMessage is skipped when a uniform [0, 1) draw is <= this value
FOLLOW_UP_SKIP_THRESHOLD = 0.3

# Gas limits are randomized per transaction
DEPLOY_GAS_RANGE = (2_500_000, 3_000_000)
UPDATE_GAS_RANGE = (80_000, 120_000)

RECEIPT_TIMEOUT_SECONDS = 120
RPC_TIMEOUT_SECONDS = 60

PRIVATE_KEY_ENV = "TEMPO_PK_FILE"
OUTPUT_PATH_ENV = "TEMPO_OUTPUT_PATH"
