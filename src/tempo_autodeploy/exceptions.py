"""Custom exception classes for tempo-autodeploy."""


class AutoDeployError(Exception):
    """Base exception for all tempo-autodeploy errors."""

    pass


class ConfigurationError(AutoDeployError, ValueError):
    """Raised when the bot configuration is inconsistent."""

    pass


class CompilationError(AutoDeployError, RuntimeError):
    """Raised when the contract source fails to compile."""

    pass


class CredentialFileNotFoundError(AutoDeployError, FileNotFoundError):
    """Raised when the private key file does not exist."""

    pass


class NoCredentialsError(AutoDeployError, ValueError):
    """Raised when the private key file contains no usable keys."""

    pass


class InvalidPrivateKeyError(AutoDeployError, ValueError):
    """Raised when a private key line cannot be turned into an account."""

    pass


class ChainConnectionError(AutoDeployError, ConnectionError):
    """Raised when the RPC endpoint cannot be reached."""

    pass


class InsufficientBalanceError(AutoDeployError, ValueError):
    """Raised when a deployer account holds no funds."""

    pass


class TransactionFailedError(AutoDeployError, RuntimeError):
    """Raised when a mined transaction reverted or produced no contract."""

    pass
