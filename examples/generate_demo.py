import json
import sys
import os
import tempfile
from pathlib import Path

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from abi2ts.processor import AbiProcessor

TOKEN_ARTIFACT = {
    "contractName": "Token",
    "abi": [
        {"type": "constructor", "inputs": [{"name": "supply", "type": "uint256"}]},
        {
            "name": "transfer",
            "type": "function",
            "inputs": [{"name": "to", "type": "address"}],
            "outputs": [{"type": "bool"}],
            "stateMutability": "nonpayable",
        },
        {
            "name": "transfer",
            "type": "function",
            "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
            "outputs": [{"type": "bool"}],
            "stateMutability": "nonpayable",
        },
        {
            "name": "Transfer",
            "type": "event",
            "anonymous": False,
            "inputs": [
                {"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False},
            ],
        },
    ],
}


def main():
    # ==========================================================================
    # 1. Write a sample artifact
    # ==========================================================================
    print("🚀 Step 1: writing sample artifact...")
    workdir = Path(tempfile.mkdtemp(prefix="abi2ts-demo-"))
    artifacts = workdir / "artifacts" / "Token.sol"
    artifacts.mkdir(parents=True)
    (artifacts / "Token.json").write_text(json.dumps(TOKEN_ARTIFACT), encoding="utf-8")
    # Debug artifacts sit next to the real ones and are skipped
    (artifacts / "Token.dbg.json").write_text(json.dumps({"buildInfo": "..."}), encoding="utf-8")
    print(f"   - Artifacts: {artifacts}")

    # ==========================================================================
    # 2. Generate TypeScript
    # ==========================================================================
    print("\n🚀 Step 2: generating TypeScript...")
    processor = AbiProcessor(workdir / "abis")
    processor.collect_abi_files(workdir / "artifacts")
    written = processor.generate_typescript_files()

    for path in written:
        print(f"✅ {path}\n")
        print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
