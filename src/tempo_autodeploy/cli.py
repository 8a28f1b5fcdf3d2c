"""Command-line entry point for tempo-autodeploy."""

import logging
import sys

from .config import BotConfig
from .exceptions import AutoDeployError
from .runner import run

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> int:
    """
    Run the bot with the environment-derived configuration.

    Returns:
        0 when the run completes (even with failed deployments), 1 on a fatal error
    """
    configure_logging()

    try:
        config = BotConfig.from_env()
        run(config)
    except AutoDeployError as e:
        logger.error("Fatal error: %s", e)
        return 1
    except Exception as e:
        logger.exception("Unexpected fatal error: %s", e)
        return 1

    logger.info("Bot finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
