"""Private key loading for tempo-autodeploy."""

from pathlib import Path
from typing import Iterable, List, Union

from eth_account import Account

from .exceptions import CredentialFileNotFoundError, InvalidPrivateKeyError, NoCredentialsError
from .types import Credential


def parse_private_keys(lines: Iterable[str]) -> List[str]:
    """
    Extract private keys from key file lines.

    Blank lines and lines starting with '#' are skipped.

    Args:
        lines: Raw lines of the key file

    Returns:
        Keys in file order, stripped of whitespace
    """
    keys = []
    for line in lines:
        key = line.strip()
        if not key or key.startswith("#"):
            continue
        keys.append(key)
    return keys


def credential_from_key(private_key: str) -> Credential:
    """
    Derive the account address for a private key.

    Raises:
        InvalidPrivateKeyError: If the key is malformed
    """
    try:
        account = Account.from_key(private_key)
    except Exception as e:  # eth_keys ValidationError is not a ValueError
        # The key itself stays out of the message
        raise InvalidPrivateKeyError(f"Invalid private key: {type(e).__name__}") from None
    return Credential(private_key=private_key, address=account.address)


def load_credentials(path: Union[Path, str]) -> List[Credential]:
    """
    Load credentials from a newline-delimited private key file.

    Args:
        path: Path to the key file

    Returns:
        Credentials in file order

    Raises:
        CredentialFileNotFoundError: If the file does not exist
        NoCredentialsError: If the file holds no keys
        InvalidPrivateKeyError: If a key is malformed
    """
    key_path = Path(path)
    try:
        with open(key_path) as f:
            keys = parse_private_keys(f)
    except FileNotFoundError as e:
        raise CredentialFileNotFoundError(f"Private key file not found at {key_path}") from e

    if not keys:
        raise NoCredentialsError(f"No private keys found in {key_path}")

    return [credential_from_key(key) for key in keys]
