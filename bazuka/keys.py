"""Names of the keys under which the chain state is stored."""

from __future__ import annotations

from .address import Address, ContractId


def height() -> str:
    return "HGT"


def outdated() -> str:
    return "OUT"


def block(index: int) -> str:
    return f"BLK-{index:010d}"


def header(index: int) -> str:
    return f"HDR-{index:010d}"


def power(index: int) -> str:
    return f"POW-{index:010d}"


def rollback(index: int) -> str:
    return f"RLK-{index:010d}"


def merkle(index: int) -> str:
    return f"MRK-{index:010d}"


def compressed_state_at(contract_id: ContractId, at: int) -> str:
    return f"CSA-{at:010d}-{contract_id}"


def account(address: Address) -> str:
    return f"ACC-{address}"


def contract_account(contract_id: ContractId) -> str:
    return f"CAC-{contract_id}"


def contract(contract_id: ContractId) -> str:
    return f"CON-{contract_id}"


def contract_updates() -> str:
    return "CUP"


def local_prefix(contract_id: ContractId) -> str:
    return f"S-{contract_id}"


def local_height(contract_id: ContractId) -> str:
    return f"{local_prefix(contract_id)}-HGT"


def local_root(contract_id: ContractId) -> str:
    return f"{local_prefix(contract_id)}-RT"


def local_tree_aux(contract_id: ContractId, tree_loc: object, aux_id: int) -> str:
    return f"{local_prefix(contract_id)}-{tree_loc}-T-{aux_id}"


def local_rollback_to_height(contract_id: ContractId, height: int) -> str:
    return f"{local_prefix(contract_id)}-RLK-{height}"


def local_scalar_value_prefix(contract_id: ContractId) -> str:
    return f"{local_prefix(contract_id)}-S"


def local_non_scalar_value_prefix(contract_id: ContractId) -> str:
    return local_prefix(contract_id)


def local_value(contract_id: ContractId, locator: object, is_scalar: bool) -> str:
    prefix = (
        local_scalar_value_prefix(contract_id)
        if is_scalar
        else local_non_scalar_value_prefix(contract_id)
    )
    return f"{prefix}-{locator}"