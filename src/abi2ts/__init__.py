"""
abi2ts: generate const-exported TypeScript declarations from contract ABIs.

The package parses the ``"abi"`` array of compiler artifacts into typed
fragments, deduplicates them, and writes one TypeScript module per artifact
exposing every fragment as an ``as const`` object plus a default export list.
"""

from .errors import (
    Abi2TsError,
    MissingNameError,
    SerializationError,
    InvalidParameterError,
    ConfigError,
    AbiFileError,
    OutputDirectoryError,
)
from .types import Fragment, FragmentInput, FragmentOutput
from .codegen import TypeScriptGenerator, create_literal_for
from .processor import AbiProcessor
from .config import CodegenConfig, load_config_from_env

__all__ = [
    # models
    "Fragment",
    "FragmentInput",
    "FragmentOutput",
    # codegen
    "TypeScriptGenerator",
    "create_literal_for",
    # pipeline
    "AbiProcessor",
    "CodegenConfig",
    "load_config_from_env",
    # errors
    "Abi2TsError",
    "MissingNameError",
    "SerializationError",
    "InvalidParameterError",
    "ConfigError",
    "AbiFileError",
    "OutputDirectoryError",
]

__version__ = "0.1.0"
