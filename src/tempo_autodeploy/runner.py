"""Run orchestration for tempo-autodeploy."""

import logging
import time
from typing import Callable, List, Optional

from .aggregator import build_summary, log_summary, save_summary
from .chain import ChainClient
from .compiler import compile_contract
from .config import BotConfig
from .constants import DEPLOY_NUMBER_STRIDE
from .credentials import load_credentials
from .exceptions import ChainConnectionError
from .executor import DeploymentExecutor
from .scheduler import Scheduler, countdown, format_duration
from .types import ContractArtifact, Credential, DeploymentOutcome, RunSummary

logger = logging.getLogger(__name__)


def process_wallet(
    executor: DeploymentExecutor,
    scheduler: Scheduler,
    credential: Credential,
    artifact: ContractArtifact,
    wallet_position: int,
    total_wallets: int,
    sleep: Callable[[float], None] = time.sleep,
) -> List[DeploymentOutcome]:
    """
    Run every planned deployment for one wallet.

    Args:
        executor: Deployment executor
        scheduler: Source of the wallet's plan and waits
        credential: Wallet to deploy from
        artifact: Compiled contract
        wallet_position: 0-based position in shuffled order
        total_wallets: Number of wallets in the run
        sleep: Wait primitive

    Returns:
        Outcomes in attempt order
    """
    plan = scheduler.plan_for_wallet()

    logger.info("#" * 60)
    logger.info("WALLET #%d/%d: %s", wallet_position + 1, total_wallets, credential.address)
    logger.info("Plan: %dx deploy, every %dh", plan.deploy_count, plan.interval_hours)
    logger.info("#" * 60)

    outcomes = []
    for attempt in range(plan.deploy_count):
        deploy_number = wallet_position * DEPLOY_NUMBER_STRIDE + attempt + 1
        outcomes.append(executor.execute(credential, artifact, deploy_number, wallet_position + 1))

        if attempt < plan.deploy_count - 1:
            wait = scheduler.inter_deploy_delay(plan.interval_hours)
            logger.info("Next deploy in ~%dh (%s)", plan.interval_hours, format_duration(wait))
            countdown(wait, f"Next deployment (#{attempt + 2}/{plan.deploy_count})", sleep)

    return outcomes


def run(
    config: BotConfig,
    chain: Optional[ChainClient] = None,
    scheduler: Optional[Scheduler] = None,
    compiler: Optional[Callable[..., ContractArtifact]] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> RunSummary:
    """
    Execute a full run and persist its summary.

    Compilation happens before the key file is read, and both happen before
    any chain interaction. Fatal errors propagate and no report is written.

    Args:
        config: Run configuration
        chain: Chain client (defaults to an HTTP client for config.rpc_url)
        scheduler: Randomized scheduler (defaults to an unseeded one)
        compiler: Callable returning the contract artifact (defaults to compile_contract)
        sleep: Wait primitive used for every delay (defaults to time.sleep)

    Returns:
        The persisted RunSummary

    Raises:
        CompilationError: If the contract does not compile
        CredentialFileNotFoundError: If the key file is missing
        NoCredentialsError: If the key file holds no keys
        ChainConnectionError: If the RPC endpoint is unreachable
    """
    logger.info("AUTO DEPLOY BOT v%s - %s", config.bot_version, config.network_name)
    logger.info("RPC: %s", config.rpc_url)
    logger.info("Chain ID: %d", config.chain_id)
    logger.info(
        "Random deploy: %d-%dx per wallet, intervals: %s",
        config.deploy_count_range[0],
        config.deploy_count_range[1],
        "/".join(f"{h}h" for h in config.interval_hours_options),
    )

    if sleep is None:
        sleep = time.sleep
    if compiler is None:
        compiler = compile_contract
    artifact = compiler(solc_version=config.solc_version)

    credentials = load_credentials(config.private_key_path)
    logger.info("Found %d wallet(s)", len(credentials))

    if chain is None:
        chain = ChainClient.from_config(config)
    if not chain.is_connected():
        raise ChainConnectionError(f"Failed to connect to {config.rpc_url}")

    if scheduler is None:
        scheduler = Scheduler(config)
    executor = DeploymentExecutor(chain, scheduler, sleep=sleep)

    wallets = scheduler.shuffle_wallets(credentials)
    logger.info("Wallets shuffled")

    outcomes: List[DeploymentOutcome] = []
    for position, credential in enumerate(wallets):
        outcomes.extend(
            process_wallet(executor, scheduler, credential, artifact, position, len(wallets), sleep)
        )

        if position < len(wallets) - 1:
            logger.info("Moving to next wallet...")
            countdown(scheduler.inter_wallet_delay(), "Starting next wallet in", sleep)

    summary = build_summary(config, outcomes)
    log_summary(summary)

    save_summary(summary, config.output_path)
    logger.info("Results saved to %s", config.output_path)

    return summary
