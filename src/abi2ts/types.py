"""Defines the ABI fragment models used by the abi2ts code generator.

This module contains the Pydantic models that represent one entry of a
contract ABI (a function, event, constructor, error, ...) together with its
input and output parameters. These models parse the raw JSON entries found
under the ``"abi"`` key of compiler artifacts, provide the identity used for
deduplication, and derive the identifiers used in generated code.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic_core import PydanticSerializationError

from abi2ts.errors import MissingNameError, SerializationError

# Scalar fields use strict types so ill-typed JSON values fail validation
# instead of being coerced.
_FRAGMENT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class FragmentInput(BaseModel):
    """Represents one input parameter of an ABI fragment.

    Attributes:
        name: The declared parameter name; compilers omit it or leave it
            empty for unnamed parameters.
        type_name: The canonical ABI type (e.g. "address", "uint256[]").
            Serialized as "type".
        indexed: Whether an event parameter is indexed. Only present on
            event inputs.
        internal_type: The Solidity-level type annotation (e.g.
            "contract IERC20"). Serialized as "internalType".
    """
    model_config = _FRAGMENT_CONFIG

    name: Optional[StrictStr] = None
    type_name: StrictStr = Field(alias="type")
    indexed: Optional[StrictBool] = None
    internal_type: Optional[StrictStr] = Field(default=None, alias="internalType")


class FragmentOutput(BaseModel):
    """Represents one output parameter of an ABI fragment.

    Outputs are never indexed, so unlike FragmentInput this model carries
    no ``indexed`` flag.

    Attributes:
        name: The declared return value name, if any.
        type_name: The canonical ABI type. Serialized as "type".
        internal_type: The Solidity-level type annotation. Serialized as
            "internalType".
    """
    model_config = _FRAGMENT_CONFIG

    name: Optional[StrictStr] = None
    type_name: StrictStr = Field(alias="type")
    internal_type: Optional[StrictStr] = Field(default=None, alias="internalType")


class Fragment(BaseModel):
    """One entry of a contract ABI.

    The ``type_name`` is kept as a free-form string rather than an enum since
    the vocabulary (function, event, constructor, fallback, receive, error)
    is defined by the compilers and keeps growing.

    The field declaration order below is the key order of the generated
    object literal.

    Attributes:
        name: The fragment name. Absent for constructors and fallbacks.
        type_name: The fragment kind. Serialized as "type".
        inputs: Ordered input parameters; order defines the calling
            convention and is preserved verbatim.
        outputs: Ordered output parameters, if the fragment has any.
        state_mutability: One of pure/view/nonpayable/payable. Serialized
            as "stateMutability".
        anonymous: Whether an event is anonymous.
    """
    model_config = _FRAGMENT_CONFIG

    name: Optional[StrictStr] = None
    type_name: StrictStr = Field(alias="type")
    inputs: List[FragmentInput]
    outputs: Optional[List[FragmentOutput]] = None
    state_mutability: Optional[StrictStr] = Field(default=None, alias="stateMutability")
    anonymous: Optional[StrictBool] = None

    @property
    def has_name(self) -> bool:
        """True when the fragment carries a non-empty name."""
        return bool(self.name)

    def get_unique_key(self) -> str:
        """Builds the identity used to deduplicate fragments.

        Two fragments are duplicates when they share name, kind and the same
        multiset of input and output types. Parameter names and parameter
        order do not take part in the key.

        Returns:
            A string of the form ``name:kind:in1,in2:out1,out2`` with the
            type lists sorted alphabetically.
        """
        input_types = sorted(param.type_name for param in self.inputs)
        output_types = sorted(param.type_name for param in (self.outputs or []))
        return ":".join([
            self.name or "",
            self.type_name,
            ",".join(input_types),
            ",".join(output_types),
        ])

    def identifier(self, use_explicit_identifier: bool) -> str:
        """Derives the TypeScript identifier for this fragment.

        Args:
            use_explicit_identifier: If True, qualify the name with the input
                types so that overloads sharing a name get distinct
                identifiers (e.g. ``transfer_address_uint256``). Array
                suffixes ``[]`` are rewritten to ``Array``.

        Returns:
            The identifier string.

        Raises:
            MissingNameError: If the fragment has no usable name.
        """
        if not self.has_name:
            raise MissingNameError(
                f"Unable to create identifier for {self.type_name} fragment without a name"
            )

        if not use_explicit_identifier:
            return self.name

        input_types = "_".join(param.type_name.replace("[]", "Array") for param in self.inputs)
        return f"{self.name}_{input_types}"

    def to_structured(self) -> Dict[str, Any]:
        """Serializes the fragment into its generic structured form.

        Absent optional fields are omitted and ABI key names ("type",
        "stateMutability", "internalType") are used.

        Returns:
            A dict whose key order follows the field declaration order.

        Raises:
            SerializationError: If pydantic cannot serialize the fragment.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"Failed to serialize fragment {self.name!r}: {e}") from e
