"""Data types and dataclasses for tempo-autodeploy."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Credential:
    """A signing key and the address derived from it."""

    private_key: str = field(repr=False)
    address: str  # Checksummed address


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract interface and creation bytecode."""

    abi: List[Dict[str, Any]]
    bytecode: str  # 0x-prefixed hex


@dataclass(frozen=True)
class DeploymentPlan:
    """How often one wallet deploys during a run."""

    deploy_count: int  # 2..4
    interval_hours: int  # 6, 12 or 24


@dataclass(frozen=True)
class DeployReceipt:
    """Result of a confirmed contract creation."""

    contract_address: str
    transaction_hash: str


@dataclass
class DeploymentOutcome:
    """Recorded result of one deployment attempt."""

    # Required fields
    success: bool
    deployer: str
    timestamp: str  # ISO-8601, UTC
    wallet_index: int  # 1-based position in shuffled order
    deploy_number: int

    # Optional fields
    contract_address: Optional[str] = None
    transaction_hash: Optional[str] = None  # follow-up setMessage tx
    explorer_url: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "success": self.success,
            "deployer": self.deployer,
            "timestamp": self.timestamp,
            "wallet_index": self.wallet_index,
            "deploy_number": self.deploy_number,
        }
        for optional_field in ["contract_address", "transaction_hash", "explorer_url", "error"]:
            value = getattr(self, optional_field)
            if value is not None:
                entry[optional_field] = value
        return entry


@dataclass
class RunSummary:
    """Aggregate record of a complete run."""

    network: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    bot_version: str
    features: Dict[str, Any]
    successful: List[DeploymentOutcome]
    failed: List[DeploymentOutcome]
    unique_wallets: int
    deployments: List[DeploymentOutcome]
    start_time: Optional[str]
    end_time: str

    @property
    def total(self) -> int:
        return len(self.deployments)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON report layout."""
        return {
            "network": self.network,
            "chain_id": self.chain_id,
            "rpc_url": self.rpc_url,
            "explorer_url": self.explorer_url,
            "bot_version": self.bot_version,
            "features": self.features,
            "total_deployments": self.total,
            "successful": len(self.successful),
            "failed": len(self.failed),
            "unique_wallets": self.unique_wallets,
            "deployments": [outcome.to_dict() for outcome in self.deployments],
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
