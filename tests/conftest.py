# tests/conftest.py
import json
import os

import pytest

TRANSFER = {
    "name": "transfer",
    "type": "function",
    "inputs": [{"name": "to", "type": "address"}],
    "outputs": [{"type": "bool"}],
    "stateMutability": "nonpayable",
}

TRANSFER_AMOUNT = {
    "name": "transfer",
    "type": "function",
    "inputs": [
        {"name": "to", "type": "address", "internalType": "address"},
        {"name": "amount", "type": "uint256", "internalType": "uint256"},
    ],
    "outputs": [{"name": "", "type": "bool", "internalType": "bool"}],
    "stateMutability": "nonpayable",
}

BALANCE_OF = {
    "name": "balanceOf",
    "type": "function",
    "inputs": [{"name": "owner", "type": "address"}],
    "outputs": [{"type": "uint256"}],
    "stateMutability": "view",
}

TRANSFER_EVENT = {
    "name": "Transfer",
    "type": "event",
    "anonymous": False,
    "inputs": [
        {"name": "from", "type": "address", "indexed": True},
        {"name": "to", "type": "address", "indexed": True},
        {"name": "value", "type": "uint256", "indexed": False},
    ],
}

CONSTRUCTOR = {
    "type": "constructor",
    "inputs": [{"name": "supply", "type": "uint256"}],
    "stateMutability": "nonpayable",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ABI2TS_* variables from the developer's shell out of the tests"""
    for key in list(os.environ):
        if key.startswith("ABI2TS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_artifact(tmp_path):
    """Factory writing a compiler artifact below tmp_path/artifacts"""
    root = tmp_path / "artifacts"

    def _write(relative: str, abi=None, **extra):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        document = dict(extra)
        if abi is not None:
            document["abi"] = abi
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    _write.root = root
    return _write


# --- ABI entry fixtures -----------------------------------------------------

@pytest.fixture
def transfer():
    return json.loads(json.dumps(TRANSFER))


@pytest.fixture
def transfer_amount():
    return json.loads(json.dumps(TRANSFER_AMOUNT))


@pytest.fixture
def balance_of():
    return json.loads(json.dumps(BALANCE_OF))


@pytest.fixture
def transfer_event():
    return json.loads(json.dumps(TRANSFER_EVENT))


@pytest.fixture
def constructor():
    return json.loads(json.dumps(CONSTRUCTOR))
