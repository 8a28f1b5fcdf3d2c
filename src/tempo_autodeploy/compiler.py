"""Solidity compilation for tempo-autodeploy."""

import logging
from typing import Any, Dict

import requests
from solcx import compile_standard, install_solc
from solcx.exceptions import SolcError, SolcInstallationError

from .constants import CONTRACT_FILENAME, CONTRACT_NAME, CONTRACT_SOURCE, SOLC_VERSION
from .exceptions import CompilationError
from .types import ContractArtifact

logger = logging.getLogger(__name__)


def build_standard_input(source: str) -> Dict[str, Any]:
    """
    Build solc standard JSON input for the contract source.

    Args:
        source: Solidity source code

    Returns:
        Standard JSON input requesting ABI and creation bytecode
    """
    return {
        "language": "Solidity",
        "sources": {CONTRACT_FILENAME: {"content": source}},
        "settings": {
            "outputSelection": {"*": {"*": ["abi", "evm.bytecode"]}},
            "optimizer": {"enabled": True, "runs": 200},
        },
    }


def extract_artifact(output: Dict[str, Any], contract_name: str = CONTRACT_NAME) -> ContractArtifact:
    """
    Pull the ABI and bytecode for one contract out of solc output.

    Args:
        output: solc standard JSON output
        contract_name: Contract to extract

    Returns:
        ContractArtifact with 0x-prefixed bytecode

    Raises:
        CompilationError: If output contains errors or lacks the contract
    """
    errors = [e for e in output.get("errors", []) if e.get("severity") == "error"]
    if errors:
        for error in errors:
            logger.error(error.get("formattedMessage", error.get("message", "")))
        raise CompilationError("Contract compilation failed")

    try:
        contract = output["contracts"][CONTRACT_FILENAME][contract_name]
        abi = contract["abi"]
        bytecode = contract["evm"]["bytecode"]["object"]
    except KeyError as e:
        raise CompilationError(f"Compiler output missing {contract_name}: {e}") from e

    if not bytecode:
        raise CompilationError(f"Compiler produced empty bytecode for {contract_name}")

    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    return ContractArtifact(abi=abi, bytecode=bytecode)


def compile_contract(
    source: str = CONTRACT_SOURCE, solc_version: str = SOLC_VERSION
) -> ContractArtifact:
    """
    Compile the contract source, installing solc first if needed.

    Args:
        source: Solidity source code
        solc_version: Compiler version to use

    Returns:
        ContractArtifact for MyContract

    Raises:
        CompilationError: If solc cannot be installed or compilation fails
    """
    logger.info("Compiling contract with solc %s...", solc_version)

    try:
        install_solc(solc_version)
    except (SolcInstallationError, requests.RequestException) as e:
        raise CompilationError(f"Unable to install solc {solc_version}: {e}") from e

    try:
        output = compile_standard(build_standard_input(source), solc_version=solc_version)
    except SolcError as e:
        raise CompilationError(f"Contract compilation failed: {e}") from e

    artifact = extract_artifact(output)
    logger.info("Contract compiled successfully")
    return artifact
