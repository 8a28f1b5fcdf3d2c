"""Path management utilities for tempo-autodeploy."""

from pathlib import Path
from typing import Optional, Union


def get_default_private_key_path() -> Path:
    """
    Get default private key file location.

    Returns:
        Path to ./pk.txt
    """
    return Path.cwd() / "pk.txt"


def get_default_output_path() -> Path:
    """
    Get default run report location.

    Returns:
        Path to ./deployments.json
    """
    return Path.cwd() / "deployments.json"


def resolve_path(path: Optional[Union[Path, str]], default: Path) -> Path:
    """
    Resolve a user-supplied path, falling back to a default.

    Args:
        path: Custom path (relative paths are made absolute)
        default: Path used when no custom path is given

    Returns:
        Absolute path
    """
    if path is None or str(path) == "":
        return default
    return Path(path).absolute()
