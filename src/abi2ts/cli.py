"""
abi2ts command line interface.

Usage:
    abi2ts --source artifacts/contracts --out-dir src/abis
    python -m abi2ts --source artifacts --out-dir abis --max-workers 8

Every flag may also be given through an ``ABI2TS_*`` environment variable
(e.g. ``ABI2TS_OUT_DIR``); flags win over the environment.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from abi2ts.config import CodegenConfig, load_config_from_env
from abi2ts.errors import ConfigError, InvalidParameterError, OutputDirectoryError
from abi2ts.processor import AbiProcessor

logger = logging.getLogger("abi2ts")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="abi2ts", description="ABI to TypeScript code generator")
    parser.add_argument("-s", "--source", default=None, help="Directory containing JSON ABI artifacts")
    parser.add_argument("-o", "--out-dir", dest="out_dir", default=None, help="Output directory (default ./abis)")
    parser.add_argument("--pattern", default=None, help="Glob pattern below the source directory (default **/*.json)")
    parser.add_argument("--extension", default=None, help="Extension of generated files (default .ts)")
    parser.add_argument("--debug-suffix", dest="debug_suffix", default=None,
                        help="Skip files ending with this suffix (default .dbg.json)")
    parser.add_argument("--max-workers", dest="max_workers", type=int, default=None, help="Worker threads")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Logging level (default INFO)")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(config: CodegenConfig) -> List[Path]:
    """Collect artifacts and write the generated files for one configuration."""
    processor = AbiProcessor(
        config.out_dir,
        extension=config.extension,
        debug_suffix=config.debug_suffix,
        max_workers=config.max_workers,
    )
    collected = processor.collect_abi_files(config.source, config.pattern)
    written = processor.generate_typescript_files()
    for path in written:
        logger.info("Generated %s", path)
    logger.info(
        "Processed %d artifacts into %d files in %s", collected, len(written), config.out_dir
    )
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env(overrides=vars(args))
    except ConfigError as e:
        _configure_logging(args.log_level or "INFO")
        logger.error("%s", e)
        return 1

    _configure_logging(config.log_level)

    try:
        run(config)
    except (InvalidParameterError, OutputDirectoryError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
