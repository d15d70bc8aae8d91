import pytest
from pydantic import ValidationError

from abi2ts.errors import MissingNameError
from abi2ts.types import Fragment, FragmentInput, FragmentOutput


# --- Parsing ----------------------------------------------------------------

def test_parse_uses_abi_keys(transfer_amount):
    """camelCase ABI keys populate the snake_case attributes"""
    fragment = Fragment.model_validate(transfer_amount)
    assert fragment.name == "transfer"
    assert fragment.type_name == "function"
    assert fragment.state_mutability == "nonpayable"
    assert [p.type_name for p in fragment.inputs] == ["address", "uint256"]
    assert fragment.inputs[1].internal_type == "uint256"
    assert fragment.outputs[0].name == ""
    assert fragment.anonymous is None


def test_parse_ignores_unknown_keys():
    """Legacy keys such as constant/payable are dropped"""
    fragment = Fragment.model_validate({
        "name": "owner",
        "type": "function",
        "constant": True,
        "payable": False,
        "inputs": [],
        "outputs": [{"type": "address", "components": []}],
    })
    assert fragment.to_structured() == {
        "name": "owner",
        "type": "function",
        "inputs": [],
        "outputs": [{"type": "address"}],
    }


def test_populate_by_attribute_name():
    fragment = Fragment(
        name="f",
        type_name="function",
        inputs=[FragmentInput(type_name="uint8", internal_type="uint8")],
        state_mutability="pure",
    )
    assert fragment.inputs[0].internal_type == "uint8"
    assert fragment.state_mutability == "pure"


@pytest.mark.parametrize("entry", [
    {"name": "noType", "inputs": []},
    {"name": "noInputs", "type": "function"},
    {"name": "badInput", "type": "function", "inputs": [{"name": "x"}]},
    {"name": 5, "type": "function", "inputs": []},
    "not an object",
    {"name": "E", "type": "event", "anonymous": "false", "inputs": []},
    {"name": "E", "type": "event", "inputs": [{"name": "a", "type": "address", "indexed": 1}]},
    {"name": "f", "type": "function", "inputs": [], "stateMutability": 1},
    {"name": "f", "type": "function", "inputs": [], "outputs": [{"type": "bool", "internalType": False}]},
])
def test_parse_rejects_malformed_entries(entry):
    with pytest.raises(ValidationError):
        Fragment.model_validate(entry)


def test_fragment_is_frozen(transfer):
    fragment = Fragment.model_validate(transfer)
    with pytest.raises(ValidationError):
        fragment.name = "other"


def test_output_has_no_indexed_flag():
    output = FragmentOutput.model_validate({"type": "bool", "indexed": True})
    assert not hasattr(output, "indexed")
    assert output.model_dump(by_alias=True, exclude_none=True) == {"type": "bool"}


# --- get_unique_key ---------------------------------------------------------

def test_unique_key_format(transfer_amount):
    fragment = Fragment.model_validate(transfer_amount)
    assert fragment.get_unique_key() == "transfer:function:address,uint256:bool"


def test_unique_key_sorts_types_and_ignores_names():
    """Parameter order and names do not change the key"""
    a = Fragment.model_validate({
        "name": "swap", "type": "function",
        "inputs": [{"name": "amount", "type": "uint256"}, {"name": "to", "type": "address"}],
        "outputs": [{"type": "uint256"}, {"type": "bool"}],
    })
    b = Fragment.model_validate({
        "name": "swap", "type": "function",
        "inputs": [{"name": "recipient", "type": "address"}, {"name": "value", "type": "uint256"}],
        "outputs": [{"type": "bool"}, {"type": "uint256"}],
    })
    assert a.get_unique_key() == b.get_unique_key() == "swap:function:address,uint256:bool,uint256"


def test_unique_key_distinguishes_kind_and_types(transfer, transfer_event):
    fragment = Fragment.model_validate(transfer)
    event = Fragment.model_validate(transfer_event)
    renamed_kind = fragment.model_copy(update={"type_name": "error"})
    assert fragment.get_unique_key() != renamed_kind.get_unique_key()
    assert event.get_unique_key() == "Transfer:event:address,address,uint256:"


def test_unique_key_without_name(constructor):
    fragment = Fragment.model_validate(constructor)
    assert fragment.get_unique_key() == ":constructor:uint256:"


# --- identifier -------------------------------------------------------------

def test_identifier_plain(transfer_amount):
    fragment = Fragment.model_validate(transfer_amount)
    assert fragment.identifier(False) == "transfer"


def test_identifier_explicit_keeps_input_order():
    fragment = Fragment.model_validate({
        "name": "transfer", "type": "function",
        "inputs": [{"type": "uint256"}, {"type": "address"}],
    })
    assert fragment.identifier(True) == "transfer_uint256_address"
    assert fragment.get_unique_key() == "transfer:function:address,uint256:"


def test_identifier_explicit_rewrites_arrays():
    fragment = Fragment.model_validate({
        "name": "setMany", "type": "function",
        "inputs": [{"type": "uint256[]"}, {"type": "address[][]"}],
    })
    assert fragment.identifier(True) == "setMany_uint256Array_addressArrayArray"


@pytest.mark.parametrize("name", [None, ""])
def test_identifier_missing_name_raises(name):
    fragment = Fragment(name=name, type_name="fallback", inputs=[])
    assert not fragment.has_name
    with pytest.raises(MissingNameError):
        fragment.identifier(False)
    with pytest.raises(MissingNameError):
        fragment.identifier(True)


# --- to_structured ----------------------------------------------------------

def test_to_structured_key_order(transfer_event):
    """Keys follow the field declaration order, absent fields are omitted"""
    structured = Fragment.model_validate(transfer_event).to_structured()
    assert list(structured) == ["name", "type", "inputs", "anonymous"]
    assert list(structured["inputs"][0]) == ["name", "type", "indexed"]
    assert structured["anonymous"] is False


def test_to_structured_reorders_source_keys():
    fragment = Fragment.model_validate({
        "stateMutability": "view",
        "outputs": [{"internalType": "uint256", "type": "uint256", "name": ""}],
        "inputs": [],
        "type": "function",
        "name": "totalSupply",
    })
    structured = fragment.to_structured()
    assert list(structured) == ["name", "type", "inputs", "outputs", "stateMutability"]
    assert list(structured["outputs"][0]) == ["name", "type", "internalType"]
