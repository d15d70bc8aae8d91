"""
Generate TypeScript ABI modules for the project's compiled contracts.

This script reads all non‐debug JSON artifacts under
`artifacts/contracts/` and writes flat TypeScript modules
into `abis/`, each exposing:

  - one `export const <fragment> = {...} as const;` per ABI entry
  - `export default [...] as const;` listing all of them

Usage:
  python3 scripts/generate_abi.py
"""

import logging
import sys
from pathlib import Path

from abi2ts.cli import run
from abi2ts.config import load_config_from_env

# —— 1. Paths ——————————————————————————————
BASE_DIR      = Path(__file__).resolve().parent.parent
ARTIFACTS_DIR = BASE_DIR / "artifacts" / "contracts"
OUTPUT_DIR    = BASE_DIR / "abis"

# —— 2. Generate ———————————————————————————————
# Environment variables (ABI2TS_*) still apply to everything not set here
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
config = load_config_from_env(overrides={"source": ARTIFACTS_DIR, "out_dir": OUTPUT_DIR})

written = run(config)
for path in written:
    print(f"Generated module: {path.relative_to(BASE_DIR)}")

if not written:
    print("No ABI modules generated.")
    sys.exit(1)
print("✅ ABI module generation complete.")
