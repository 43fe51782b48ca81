# chemistry/transfer/spill.py
from chemistry.config import LOG_SOURCE_CHEMISTRY, MSG_SPILL
from chemistry.game_object import GameObject
from chemistry.transfer.transfer_result import TransferResult
from chemistry.utils.logger import Logger
from chemistry.world import World

def spill_onto(source_obj: GameObject, target_obj: GameObject, world: World, logger=None) -> TransferResult:
    """
    Splash everything in the source container onto the target's position.
    Callers are expected to have checked access_gate.can_harm first.
    """
    logger = logger or Logger
    container = source_obj.container
    recipient = target_obj.recipient
    if container is None or recipient is None:
        logger.warning(LOG_SOURCE_CHEMISTRY, f"Spill requested from {source_obj!r} onto {target_obj!r} without the needed capabilities.")
        return TransferResult(False)

    if container.is_empty:
        return TransferResult(False)

    spilled = container.spill_all()
    world.spill_at(recipient.world_pos, spilled)
    logger.debug(LOG_SOURCE_CHEMISTRY, f"Spilled {spilled!r} at {recipient.world_pos}")
    return TransferResult(True, MSG_SPILL.format(name=source_obj.name, target_name=target_obj.name), spilled.total)
