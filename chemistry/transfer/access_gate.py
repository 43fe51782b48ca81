# chemistry/transfer/access_gate.py
"""
Predicates deciding whether an interaction between two objects is allowed at
all, checked before any direction is resolved or reagent is moved.
"""
from typing import Optional

from chemistry.game_object import GameObject
from chemistry.transfer.transfer_mode import TransferMode

class NetworkSide:
    SERVER = "server" # Authoritative: whitelist checks apply
    CLIENT = "client"

def can_assist(src_obj: Optional[GameObject], dst_obj: Optional[GameObject], side: str) -> bool:
    """Can the held object and the target cooperate in a container-to-container transfer?"""
    if src_obj is None or dst_obj is None:
        return False

    src_container = src_obj.container
    dst_container = dst_obj.container
    if src_container is None or dst_container is None:
        return False

    if (src_container.transfer_mode == TransferMode.NO_TRANSFER
            or dst_container.transfer_mode == TransferMode.NO_TRANSFER):
        return False

    if side == NetworkSide.SERVER:
        src_traits = src_container.config.trait_whitelist
        if src_container.config.trait_whitelist_on and not dst_obj.has_any_trait(src_traits):
            return False

        # NOTE: the destination's own whitelist switches this check on, but the
        # traits compared are still the source's. Kept as-is; see DESIGN.md.
        if dst_container.config.trait_whitelist_on and not dst_obj.has_any_trait(src_traits):
            return False

    return dst_container.transfer_mode != TransferMode.SYRINGE

def can_harm(src_obj: Optional[GameObject], dst_obj: Optional[GameObject], side: str) -> bool:
    """Can the held object's contents be splashed onto the target?"""
    if src_obj is None or dst_obj is None:
        return False

    src_container = src_obj.container
    if src_container is None:
        return False

    if src_container.transfer_mode == TransferMode.NO_TRANSFER:
        return False

    return dst_obj.recipient is not None
