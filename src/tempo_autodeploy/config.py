"""Run configuration for tempo-autodeploy."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from . import constants
from .exceptions import ConfigurationError
from .paths import get_default_output_path, get_default_private_key_path, resolve_path


@dataclass(frozen=True)
class BotConfig:
    """Immutable settings shared by every component of a run."""

    network_name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    private_key_path: Path
    output_path: Path

    deploy_count_range: Tuple[int, int] = constants.DEPLOY_COUNT_RANGE
    interval_hours_options: Tuple[int, ...] = constants.INTERVAL_HOURS_OPTIONS
    interval_jitter_seconds: int = constants.INTERVAL_JITTER_SECONDS
    wallet_delay_range: Tuple[int, int] = constants.WALLET_DELAY_RANGE
    update_delay_range: Tuple[int, int] = constants.UPDATE_DELAY_RANGE
    follow_up_skip_threshold: float = constants.FOLLOW_UP_SKIP_THRESHOLD
    deploy_gas_range: Tuple[int, int] = constants.DEPLOY_GAS_RANGE
    update_gas_range: Tuple[int, int] = constants.UPDATE_GAS_RANGE
    messages: Tuple[str, ...] = constants.MESSAGES

    solc_version: str = constants.SOLC_VERSION
    receipt_timeout: int = constants.RECEIPT_TIMEOUT_SECONDS
    rpc_timeout: int = constants.RPC_TIMEOUT_SECONDS
    bot_version: str = constants.BOT_VERSION

    def __post_init__(self) -> None:
        for name in [
            "deploy_count_range",
            "wallet_delay_range",
            "update_delay_range",
            "deploy_gas_range",
            "update_gas_range",
        ]:
            low, high = getattr(self, name)
            if low > high:
                raise ConfigurationError(f"{name} is empty: {low} > {high}")

        if self.deploy_count_range[0] < 1:
            raise ConfigurationError("deploy_count_range must start at 1 or above")
        # Deploy numbers stay unique only while a wallet never exceeds the stride
        if self.deploy_count_range[1] > constants.DEPLOY_NUMBER_STRIDE:
            raise ConfigurationError(
                f"deploy_count_range must not exceed {constants.DEPLOY_NUMBER_STRIDE} deployments"
            )
        if not self.interval_hours_options:
            raise ConfigurationError("interval_hours_options must not be empty")
        # Jittered inter-deploy waits must stay positive
        if min(self.interval_hours_options) * 3600 <= self.interval_jitter_seconds:
            raise ConfigurationError(
                "interval_jitter_seconds must be smaller than the shortest interval"
            )
        if not self.messages:
            raise ConfigurationError("messages must not be empty")
        if not 0.0 <= self.follow_up_skip_threshold <= 1.0:
            raise ConfigurationError("follow_up_skip_threshold must be within [0, 1]")

    @classmethod
    def from_env(
        cls,
        network: str = constants.DEFAULT_NETWORK,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "BotConfig":
        """
        Build the configuration from constants and environment overrides.

        Args:
            network: Key into NETWORK_CONFIG
            environ: Environment mapping (defaults to os.environ)

        Returns:
            BotConfig instance

        Raises:
            ConfigurationError: If the network is unknown
        """
        if environ is None:
            environ = os.environ

        if network not in constants.NETWORK_CONFIG:
            raise ConfigurationError(f"Unknown network: {network}")
        network_config = constants.NETWORK_CONFIG[network]

        rpc_url = environ.get(network_config["default_rpc_env"]) or network_config["rpc_url"]

        return cls(
            network_name=network_config["chain_name"],
            chain_id=network_config["chain_id"],
            rpc_url=rpc_url,
            explorer_url=network_config["block_explorer_url"],
            private_key_path=resolve_path(
                environ.get(constants.PRIVATE_KEY_ENV), get_default_private_key_path()
            ),
            output_path=resolve_path(
                environ.get(constants.OUTPUT_PATH_ENV), get_default_output_path()
            ),
        )
