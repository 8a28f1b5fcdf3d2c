"""Single deployment attempts for tempo-autodeploy."""

import logging
import time
from typing import Callable, Optional

from .chain import ChainClient
from .exceptions import InsufficientBalanceError
from .scheduler import Scheduler, countdown
from .timestamps import isoformat_utc
from .types import ContractArtifact, Credential, DeploymentOutcome

logger = logging.getLogger(__name__)


class DeploymentExecutor:
    """Runs one deploy-and-maybe-update cycle and reports the outcome."""

    def __init__(
        self,
        chain: ChainClient,
        scheduler: Scheduler,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the executor.

        Args:
            chain: Client used for every chain interaction
            scheduler: Source of gas limits, pacing and follow-up decisions
            sleep: Wait primitive for the pre-update pacing delay
        """
        self.chain = chain
        self.scheduler = scheduler
        self.sleep = sleep

    def execute(
        self,
        credential: Credential,
        artifact: ContractArtifact,
        deploy_number: int,
        wallet_index: int,
    ) -> DeploymentOutcome:
        """
        Perform one deployment attempt.

        Never raises for chain-level failures: zero balance, rejected or
        reverted transactions, receipt timeouts and failed reads all come
        back as an outcome with success=False and the error message.

        Args:
            credential: Deployer
            artifact: Compiled contract shared across the run
            deploy_number: Run-unique attempt number
            wallet_index: 1-based wallet position in shuffled order

        Returns:
            DeploymentOutcome for this attempt
        """
        logger.info("=" * 60)
        logger.info("DEPLOYMENT #%d - WALLET #%d", deploy_number, wallet_index)
        logger.info("=" * 60)
        logger.info("Deployer: %s", credential.address)

        try:
            contract_address, tx_hash = self._attempt(credential, artifact)
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.error("Deployment failed: %s", error)
            return DeploymentOutcome(
                success=False,
                deployer=credential.address,
                timestamp=isoformat_utc(),
                wallet_index=wallet_index,
                deploy_number=deploy_number,
                error=error,
            )

        return DeploymentOutcome(
            success=True,
            deployer=credential.address,
            timestamp=isoformat_utc(),
            wallet_index=wallet_index,
            deploy_number=deploy_number,
            contract_address=contract_address,
            transaction_hash=tx_hash,
            explorer_url=self.chain.explorer_address_url(contract_address),
        )

    def _attempt(self, credential: Credential, artifact: ContractArtifact) -> tuple[str, Optional[str]]:
        """Deploy, read back and maybe update; returns (contract address, setMessage hash or None)."""
        balance = self.chain.get_balance(credential.address)
        logger.info("Balance: %s", self.chain.format_balance(balance))
        if balance == 0:
            raise InsufficientBalanceError(
                f"Insufficient balance: {credential.address} has 0 funds, skipping deploy"
            )

        gas_limit = self.scheduler.deploy_gas_limit()
        logger.info("Gas limit: %d", gas_limit)

        logger.info("Deploying contract...")
        deployed = self.chain.deploy(credential, artifact, gas_limit)
        contract_address = deployed.contract_address
        logger.info("Contract deployed at %s", contract_address)
        logger.info("Explorer: %s", self.chain.explorer_address_url(contract_address))

        message = self.chain.read_message(contract_address, artifact.abi)
        logger.info("Initial message: %s", message)

        if not self.scheduler.should_send_follow_up():
            logger.info("Skipping message update (random behavior)")
            return contract_address, None

        countdown(self.scheduler.update_delay(), "Updating message in", self.sleep)

        new_message = self.scheduler.pick_message()
        logger.info('Setting message: "%s"', new_message)
        tx_hash = self.chain.set_message(
            credential,
            contract_address,
            artifact.abi,
            new_message,
            self.scheduler.update_gas_limit(),
        )
        logger.info("Message updated: %s", self.chain.explorer_tx_url(tx_hash))

        updated = self.chain.read_message(contract_address, artifact.abi)
        logger.info("New message: %s", updated)

        return contract_address, tx_hash
