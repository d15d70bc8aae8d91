"""
abi2ts Processor Subpackage.

This package provides the file pipeline that discovers ABI artifacts,
groups their fragments per output file and writes the generated TypeScript.
"""

from .abi_processor import AbiProcessor

__all__ = [
    "AbiProcessor",
]
