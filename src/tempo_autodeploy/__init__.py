"""
tempo-autodeploy: randomized multi-wallet contract deployment on Tempo Testnet
"""

from importlib.metadata import PackageNotFoundError, version

from .aggregator import build_summary, save_summary
from .chain import ChainClient
from .compiler import compile_contract
from .config import BotConfig
from .credentials import load_credentials
from .exceptions import (
    AutoDeployError,
    ChainConnectionError,
    CompilationError,
    ConfigurationError,
    CredentialFileNotFoundError,
    InsufficientBalanceError,
    InvalidPrivateKeyError,
    NoCredentialsError,
    TransactionFailedError,
)
from .executor import DeploymentExecutor
from .runner import run
from .scheduler import Scheduler
from .types import ContractArtifact, Credential, DeploymentOutcome, DeploymentPlan, RunSummary

try:
    __version__ = version("tempo-autodeploy")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "BotConfig",
    "ChainClient",
    "DeploymentExecutor",
    "Scheduler",
    "run",
    "compile_contract",
    "load_credentials",
    "build_summary",
    "save_summary",
    "Credential",
    "ContractArtifact",
    "DeploymentPlan",
    "DeploymentOutcome",
    "RunSummary",
    "AutoDeployError",
    "ConfigurationError",
    "CompilationError",
    "CredentialFileNotFoundError",
    "NoCredentialsError",
    "InvalidPrivateKeyError",
    "ChainConnectionError",
    "InsufficientBalanceError",
    "TransactionFailedError",
]
