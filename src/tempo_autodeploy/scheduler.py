"""Randomized scheduling for tempo-autodeploy.

Every decision that shapes a run (wallet order, deploy counts, waits, gas
limits, follow-up transactions, messages) is drawn here, from an injectable
``random.Random`` so tests can seed it.
"""

import logging
import random
import time
from typing import Callable, List, Optional, Sequence, TypeVar

from .config import BotConfig
from .types import DeploymentPlan

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Scheduler:
    """Draws randomized plans and delays for a run."""

    def __init__(self, config: BotConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def shuffle_wallets(self, credentials: Sequence[T]) -> List[T]:
        """
        Return a uniformly random permutation of credentials.

        Fisher-Yates over a copy; the input is left untouched.
        """
        shuffled = list(credentials)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def plan_for_wallet(self) -> DeploymentPlan:
        low, high = self.config.deploy_count_range
        return DeploymentPlan(
            deploy_count=self.rng.randint(low, high),
            interval_hours=self.rng.choice(self.config.interval_hours_options),
        )

    def inter_deploy_delay(self, interval_hours: int) -> int:
        """Seconds to wait between deployments: interval plus jitter."""
        jitter = self.config.interval_jitter_seconds
        return interval_hours * 3600 + self.rng.randint(-jitter, jitter)

    def inter_wallet_delay(self) -> int:
        low, high = self.config.wallet_delay_range
        return self.rng.randint(low, high)

    def update_delay(self) -> int:
        low, high = self.config.update_delay_range
        return self.rng.randint(low, high)

    def should_send_follow_up(self) -> bool:
        return self.rng.random() > self.config.follow_up_skip_threshold

    def pick_message(self) -> str:
        return self.rng.choice(self.config.messages)

    def deploy_gas_limit(self) -> int:
        low, high = self.config.deploy_gas_range
        return self.rng.randint(low, high)

    def update_gas_limit(self) -> int:
        low, high = self.config.update_gas_range
        return self.rng.randint(low, high)


def format_duration(seconds: int) -> str:
    """
    Render a duration as "1h 2m 3s", "2m 3s" or "3s".

    Args:
        seconds: Whole seconds

    Returns:
        Human-readable duration
    """
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def countdown(
    seconds: int,
    label: str = "Next action in",
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Announce a wait, then suspend for the full duration."""
    logger.info("%s: %s", label, format_duration(seconds))
    sleep(seconds)
    logger.info("%s: ready", label)
