"""Unit tests for ChainClient against a mocked JSON-RPC endpoint."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
import responses
from eth_account import Account
from eth_account.typed_transactions import TypedTransaction
from hexbytes import HexBytes

from tempo_autodeploy.chain import ChainClient
from tempo_autodeploy.exceptions import TransactionFailedError

RPC_URL = "http://localhost:8545"
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"

# ABI-encoded string "Hello Tempo!"
HELLO_TEMPO = (
    "0x"
    + "0" * 62
    + "20"
    + "0" * 63
    + "c"
    + "48656c6c6f2054656d706f21"
    + "0" * 40
)

TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32


class RpcStub:
    """Answers JSON-RPC calls by method name and records them."""

    def __init__(self, results: Dict[str, Any]):
        self.results = results
        self.methods: List[str] = []
        self.params: List[Any] = []

    def __call__(self, request):
        payload = json.loads(request.body)
        method = payload["method"]
        self.methods.append(method)
        self.params.append(payload.get("params"))

        if method in self.results:
            body = {"jsonrpc": "2.0", "id": payload["id"], "result": self.results[method]}
        else:
            body = {
                "jsonrpc": "2.0",
                "id": payload["id"],
                "error": {"code": -32601, "message": f"method {method} not stubbed"},
            }
        return (200, {"Content-Type": "application/json"}, json.dumps(body))


@pytest.fixture
def client(config) -> ChainClient:
    return ChainClient.from_config(config, session=requests.Session())


def stub_rpc(results: Dict[str, Any]) -> RpcStub:
    stub = RpcStub({"eth_chainId": hex(42429), **results})
    responses.add_callback(responses.POST, RPC_URL, callback=stub, content_type="application/json")
    return stub


class TestFromConfig:
    """Test ChainClient construction."""

    def test_uses_config_values(self, client: ChainClient):
        assert client.chain_id == 42429
        assert client.explorer_url == "https://explorer.test"
        assert client.receipt_timeout == 120

    def test_strips_trailing_slash_from_explorer(self, client: ChainClient):
        other = ChainClient(client.web3, chain_id=1, explorer_url="https://explorer.test/")
        assert other.explorer_address_url("0xabc") == "https://explorer.test/address/0xabc"


class TestExplorerUrls:
    """Test explorer link helpers."""

    def test_address_url(self, client: ChainClient):
        assert client.explorer_address_url(CONTRACT) == f"https://explorer.test/address/{CONTRACT}"

    def test_tx_url(self, client: ChainClient):
        assert client.explorer_tx_url("0x12") == "https://explorer.test/tx/0x12"


class TestRpcCalls:
    """Test calls that go over HTTP."""

    @responses.activate
    def test_is_connected(self, client: ChainClient):
        """Test that a reachable node reports connected."""
        stub = stub_rpc({"web3_clientVersion": "tempo/v1.0.0"})

        assert client.is_connected() is True
        assert "web3_clientVersion" in stub.methods

    @responses.activate
    def test_get_balance(self, client: ChainClient, credentials):
        """Test that the balance is decoded from hex wei."""
        stub = stub_rpc({"eth_getBalance": hex(10**18)})

        balance = client.get_balance(credentials[0].address)

        assert balance == 10**18
        index = stub.methods.index("eth_getBalance")
        assert stub.params[index][0].lower() == credentials[0].address.lower()

    @responses.activate
    def test_get_zero_balance(self, client: ChainClient, credentials):
        stub_rpc({"eth_getBalance": "0x0"})
        assert client.get_balance(credentials[0].address) == 0

    @responses.activate
    def test_read_message(self, client: ChainClient, artifact):
        """Test that message() is called and the string decoded."""
        stub = stub_rpc({"eth_call": HELLO_TEMPO})

        assert client.read_message(CONTRACT, artifact.abi) == "Hello Tempo!"

        index = stub.methods.index("eth_call")
        call = stub.params[index][0]
        assert call["to"].lower() == CONTRACT.lower()
        # keccak256("message()")[:4]
        assert call["data"] == "0xe21f37ce"



def receipt(status: str = "0x1", contract_address: Optional[str] = CONTRACT) -> Dict[str, Any]:
    return {
        "transactionHash": TX_HASH,
        "transactionIndex": "0x0",
        "blockHash": BLOCK_HASH,
        "blockNumber": "0x10",
        "cumulativeGasUsed": "0x5208",
        "gasUsed": "0x5208",
        "effectiveGasPrice": "0x3b9aca00",
        "contractAddress": contract_address,
        "logs": [],
        "status": status,
    }


def stub_transactions(tx_receipt: Dict[str, Any]) -> RpcStub:
    return stub_rpc(
        {
            "eth_getTransactionCount": "0x7",
            "eth_gasPrice": "0x3b9aca00",
            "eth_maxPriorityFeePerGas": "0x3b9aca00",
            "eth_getBlockByNumber": {
                "number": "0x10",
                "hash": BLOCK_HASH,
                "baseFeePerGas": "0x3b9aca00",
                "gasLimit": "0x1c9c380",
                "timestamp": "0x6553f100",
                "transactions": [],
            },
            "eth_sendRawTransaction": TX_HASH,
            "eth_getTransactionReceipt": tx_receipt,
        }
    )


def sent_transaction(stub: RpcStub) -> Dict[str, Any]:
    """Decode the raw transaction handed to eth_sendRawTransaction."""
    raw = stub.params[stub.methods.index("eth_sendRawTransaction")][0]
    tx = TypedTransaction.from_bytes(HexBytes(raw)).as_dict()
    tx["sender"] = Account.recover_transaction(raw)
    return tx


class TestTransactions:
    """Test signed transactions sent through the RPC endpoint."""

    @responses.activate
    def test_deploy_returns_receipt(self, client: ChainClient, credentials, artifact):
        """Test that deploy reports the mined contract address and hash."""
        stub = stub_transactions(receipt())

        deployed = client.deploy(credentials[0], artifact, 2_600_000)

        assert deployed.contract_address == CONTRACT
        assert deployed.transaction_hash == TX_HASH
        assert "eth_getTransactionReceipt" in stub.methods

    @responses.activate
    def test_deploy_signs_with_chain_nonce_and_gas(self, client: ChainClient, credentials, artifact):
        """Test that the signed creation transaction carries chain ID, nonce and gas limit."""
        stub = stub_transactions(receipt())

        client.deploy(credentials[0], artifact, 2_600_000)

        tx = sent_transaction(stub)
        assert tx["sender"] == credentials[0].address
        assert tx["chainId"] == 42429
        assert tx["nonce"] == 7
        assert tx["gas"] == 2_600_000
        assert not tx.get("to")

    @responses.activate
    def test_deploy_reverted(self, client: ChainClient, credentials, artifact):
        stub_transactions(receipt(status="0x0"))

        with pytest.raises(TransactionFailedError, match="reverted"):
            client.deploy(credentials[0], artifact, 2_600_000)

    @responses.activate
    def test_deploy_without_contract_address(self, client: ChainClient, credentials, artifact):
        """Test that a successful receipt with no created contract is a failure."""
        stub_transactions(receipt(contract_address=None))

        with pytest.raises(TransactionFailedError, match="no contract address"):
            client.deploy(credentials[0], artifact, 2_600_000)

    @responses.activate
    def test_set_message_returns_hash(self, client: ChainClient, credentials, artifact):
        """Test that setMessage is signed with the given gas limit and its hash returned."""
        stub = stub_transactions(receipt(contract_address=None))

        tx_hash = client.set_message(credentials[1], CONTRACT, artifact.abi, "Tempo GM!", 95_000)

        assert tx_hash == TX_HASH
        tx = sent_transaction(stub)
        assert tx["sender"] == credentials[1].address
        assert tx["gas"] == 95_000
        assert tx["chainId"] == 42429

    @responses.activate
    def test_set_message_reverted(self, client: ChainClient, credentials, artifact):
        stub_transactions(receipt(status="0x0", contract_address=None))

        with pytest.raises(TransactionFailedError):
            client.set_message(credentials[0], CONTRACT, artifact.abi, "Tempo GM!", 95_000)


def test_format_balance(client: ChainClient):
    assert client.format_balance(10**18) == "1 ETH"
