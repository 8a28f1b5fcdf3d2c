"""Run summary aggregation and persistence for tempo-autodeploy."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

from .config import BotConfig
from .timestamps import isoformat_utc
from .types import DeploymentOutcome, RunSummary

logger = logging.getLogger(__name__)


def describe_features(config: BotConfig) -> Dict[str, Any]:
    """Describe the randomization features active for a run."""
    low, high = config.deploy_count_range
    return {
        "random_deploy_count": f"{low}-{high}",
        "random_intervals": [f"{h}h" for h in config.interval_hours_options],
        "anti_detection": True,
        "shuffled_wallets": True,
        "random_delays": True,
    }


def build_summary(config: BotConfig, outcomes: Sequence[DeploymentOutcome]) -> RunSummary:
    """
    Fold deployment outcomes into a run summary.

    Outcomes keep the order they were produced in. Unique wallets count
    deployers across failed attempts as well as successful ones.

    Args:
        config: Run configuration (network metadata)
        outcomes: Every outcome of the run, in execution order

    Returns:
        RunSummary with end_time set to now
    """
    deployments = list(outcomes)
    successful = [o for o in deployments if o.success]
    failed = [o for o in deployments if not o.success]
    unique_wallets = len({o.deployer for o in deployments})

    return RunSummary(
        network=config.network_name,
        chain_id=config.chain_id,
        rpc_url=config.rpc_url,
        explorer_url=config.explorer_url,
        bot_version=config.bot_version,
        features=describe_features(config),
        successful=successful,
        failed=failed,
        unique_wallets=unique_wallets,
        deployments=deployments,
        start_time=deployments[0].timestamp if deployments else None,
        end_time=isoformat_utc(),
    )


def save_summary(summary: RunSummary, output_path: Path) -> None:
    """
    Write the run summary as JSON.

    Creates parent directories if they don't exist.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(summary.to_dict(), f, indent=2)


def log_summary(summary: RunSummary) -> None:
    """Log a human-readable final summary."""
    logger.info("=" * 60)
    logger.info("FINAL SUMMARY")
    logger.info("=" * 60)
    logger.info("Successful: %d", len(summary.successful))
    logger.info("Failed: %d", len(summary.failed))
    logger.info("Total: %d", summary.total)
    logger.info("Wallets used: %d", summary.unique_wallets)

    if summary.successful:
        logger.info("Successful deployments:")
        for i, outcome in enumerate(summary.successful, start=1):
            logger.info("%d. %s", i, outcome.contract_address)
            logger.info("   Deployer: %s", outcome.deployer)
            logger.info("   Wallet #%d Deploy #%d", outcome.wallet_index, outcome.deploy_number)
            logger.info("   Time: %s", outcome.timestamp)

    if summary.failed:
        logger.info("Failed deployments:")
        for i, outcome in enumerate(summary.failed, start=1):
            logger.info("%d. Wallet #%d", i, outcome.wallet_index)
            logger.info("   Deployer: %s", outcome.deployer)
            logger.info("   Error: %s", outcome.error)
