"""Shared pytest fixtures for tempo-autodeploy tests."""

import json
import random
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
from eth_account import Account

from tempo_autodeploy.config import BotConfig
from tempo_autodeploy.scheduler import Scheduler
from tempo_autodeploy.types import ContractArtifact, Credential, DeployReceipt

# Valid secp256k1 keys (never funded anywhere)
TEST_PRIVATE_KEYS = ["0x" + f"{i:064x}" for i in range(1, 6)]


class FakeChainClient:
    """In-memory stand-in for ChainClient that records every call."""

    def __init__(self, balances: Optional[Dict[str, int]] = None, default_balance: int = 10**18):
        self.balances = balances or {}
        self.default_balance = default_balance
        self.connected = True
        self.calls: List[tuple] = []
        self.messages: Dict[str, str] = {}
        self.deploy_error: Optional[Exception] = None
        self.read_error: Optional[Exception] = None
        self.set_message_error: Optional[Exception] = None
        self._counter = 0

    def is_connected(self) -> bool:
        self.calls.append(("is_connected",))
        return self.connected

    def get_balance(self, address: str) -> int:
        self.calls.append(("get_balance", address))
        return self.balances.get(address, self.default_balance)

    def format_balance(self, wei: int) -> str:
        return f"{wei} wei"

    def explorer_address_url(self, address: str) -> str:
        return f"https://explorer.test/address/{address}"

    def explorer_tx_url(self, tx_hash: str) -> str:
        return f"https://explorer.test/tx/{tx_hash}"

    def deploy(self, credential: Credential, artifact: ContractArtifact, gas_limit: int) -> DeployReceipt:
        self.calls.append(("deploy", credential.address, gas_limit))
        if self.deploy_error is not None:
            raise self.deploy_error
        self._counter += 1
        address = "0x" + f"{self._counter:040x}"
        self.messages[address] = "Hello Tempo!"
        return DeployReceipt(contract_address=address, transaction_hash="0xfeed" + f"{self._counter:060x}")

    def read_message(self, contract_address: str, abi: List[Dict[str, Any]]) -> str:
        self.calls.append(("read_message", contract_address))
        if self.read_error is not None:
            raise self.read_error
        return self.messages[contract_address]

    def set_message(
        self,
        credential: Credential,
        contract_address: str,
        abi: List[Dict[str, Any]],
        message: str,
        gas_limit: int,
    ) -> str:
        self.calls.append(("set_message", contract_address, message, gas_limit))
        if self.set_message_error is not None:
            raise self.set_message_error
        self.messages[contract_address] = message
        self._counter += 1
        return "0xbeef" + f"{self._counter:060x}"

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


class SleepRecorder:
    """Records requested waits instead of sleeping."""

    def __init__(self):
        self.waits: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifact(fixtures_dir: Path) -> ContractArtifact:
    """Load the compiled MyContract fixture."""
    with open(fixtures_dir / "my_contract_artifact.json") as f:
        data = json.load(f)
    return ContractArtifact(abi=data["abi"], bytecode=data["bytecode"])


@pytest.fixture
def solc_output(fixtures_dir: Path) -> Dict[str, Any]:
    """Load a sample solc standard JSON output."""
    with open(fixtures_dir / "solc_output.json") as f:
        return json.load(f)


@pytest.fixture
def config(tmp_path: Path) -> BotConfig:
    """Create a config whose key file and report live in a temp directory."""
    return BotConfig(
        network_name="Tempo Testnet",
        chain_id=42429,
        rpc_url="http://localhost:8545",
        explorer_url="https://explorer.test",
        private_key_path=tmp_path / "pk.txt",
        output_path=tmp_path / "out" / "deployments.json",
    )


@pytest.fixture
def credentials() -> List[Credential]:
    """Return credentials for the test keys."""
    return [Credential(private_key=k, address=Account.from_key(k).address) for k in TEST_PRIVATE_KEYS]


@pytest.fixture
def write_keys(config: BotConfig) -> Callable[[List[str]], Path]:
    """Return a helper that writes key file lines to the configured path."""

    def _write(lines: List[str]) -> Path:
        config.private_key_path.write_text("\n".join(lines) + "\n")
        return config.private_key_path

    return _write


@pytest.fixture
def fake_chain() -> FakeChainClient:
    return FakeChainClient()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def scheduler(config: BotConfig) -> Scheduler:
    """Scheduler with a seeded generator."""
    return Scheduler(config, rng=random.Random(1234))


@pytest.fixture
def fake_compiler(artifact: ContractArtifact) -> Callable[..., ContractArtifact]:
    """Compiler stand-in that returns the fixture artifact."""

    def _compile(**kwargs: Any) -> ContractArtifact:
        return artifact

    return _compile


@pytest.fixture
def make_chain() -> Callable[..., FakeChainClient]:
    """Return a factory for fake chain clients with custom balances."""
    return FakeChainClient


@pytest.fixture
def private_keys() -> List[str]:
    return list(TEST_PRIVATE_KEYS)
