"""
abi2ts Codegen Subpackage.

This package turns parsed ABI fragments into TypeScript source text: a
generic literal renderer and the declaration generator that assembles one
output file per unit.
"""

from .literal import create_literal_for
from .generator import TypeScriptGenerator

__all__ = [
    "create_literal_for",
    "TypeScriptGenerator",
]
