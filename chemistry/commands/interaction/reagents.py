# chemistry/commands/interaction/reagents.py
from typing import List, Optional, Tuple

from chemistry.commands.command_system import command
from chemistry.config import (
    BLOCKED_MESSAGES, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS,
    MSG_CONTAINER_EMPTY, MSG_TRANSFER_AMOUNT_CHANGED, SPILL_COMMAND_PREPOSITION,
    TRANSFER_COMMAND_PREPOSITION
)
from chemistry.game_object import GameObject
from chemistry.transfer import access_gate, amount_cycler
from chemistry.transfer.access_gate import NetworkSide
from chemistry.transfer.spill import spill_onto
from chemistry.transfer.transfer_executor import TransferExecutor
from chemistry.utils.logger import Logger
from chemistry.utils.text_formatter import format_amount

def _split_on(args: List[str], preposition: str) -> Optional[Tuple[str, str]]:
    lowered = [a.lower() for a in args]
    if preposition not in lowered:
        return None
    idx = lowered.index(preposition)
    first, second = " ".join(args[:idx]), " ".join(args[idx+1:])
    if not first or not second:
        return None
    return first, second

def _find_pair(world, first: str, second: str):
    """Returns (obj_one, obj_two, error_message)."""
    one = world.find_object(first)
    if not one: return None, None, f"{FORMAT_ERROR}You don't see '{first}' here.{FORMAT_RESET}"
    two = world.find_object(second)
    if not two: return None, None, f"{FORMAT_ERROR}You don't see '{second}' here.{FORMAT_RESET}"
    return one, two, ""

@command("pour", ["transfer"], "interaction",
         f"Move reagents between two containers.\nUsage: pour <container> {TRANSFER_COMMAND_PREPOSITION} <container>")
def pour_handler(args, context):
    world = context["world"]
    side = context.get("side", NetworkSide.SERVER)
    logger = context.get("logger") or Logger

    names = _split_on(args, TRANSFER_COMMAND_PREPOSITION)
    if not names:
        return f"{FORMAT_ERROR}Usage: pour <container> {TRANSFER_COMMAND_PREPOSITION} <container>{FORMAT_RESET}"

    one_obj, two_obj, error = _find_pair(world, *names)
    if error: return error
    if one_obj is two_obj:
        return f"{FORMAT_ERROR}You can't pour the {one_obj.name} into itself.{FORMAT_RESET}"

    for obj in (one_obj, two_obj):
        if obj.container is None:
            return f"{FORMAT_ERROR}The {obj.name} can't hold reagents.{FORMAT_RESET}"

    if not access_gate.can_assist(one_obj, two_obj, side):
        return f"{FORMAT_ERROR}You can't transfer reagents between the {one_obj.name} and the {two_obj.name}.{FORMAT_RESET}"

    one, two = one_obj.container, two_obj.container
    # Direction is resolved and refused reagents go back to the source while both containers are locked
    result = TransferExecutor(logger=logger).execute(one, two, reinstate_excess=True)

    if result.message in BLOCKED_MESSAGES:
        return f"{FORMAT_ERROR}{BLOCKED_MESSAGES[result.message]}{FORMAT_RESET}"
    if not result.success and not result.message:
        return f"{FORMAT_ERROR}Nothing happens.{FORMAT_RESET}"

    color = FORMAT_SUCCESS if result.success else FORMAT_ERROR
    return f"{color}{result.message}{FORMAT_RESET}"

@command("splash", ["spill"], "interaction",
         f"Splash a container's contents onto someone.\nUsage: splash <container> {SPILL_COMMAND_PREPOSITION} <target>")
def splash_handler(args, context):
    world = context["world"]
    side = context.get("side", NetworkSide.SERVER)
    logger = context.get("logger") or Logger

    names = _split_on(args, SPILL_COMMAND_PREPOSITION)
    if not names:
        return f"{FORMAT_ERROR}Usage: splash <container> {SPILL_COMMAND_PREPOSITION} <target>{FORMAT_RESET}"

    src_obj, dst_obj, error = _find_pair(world, *names)
    if error: return error

    if not access_gate.can_harm(src_obj, dst_obj, side):
        return f"{FORMAT_ERROR}You can't splash the {src_obj.name} onto the {dst_obj.name}.{FORMAT_RESET}"

    result = spill_onto(src_obj, dst_obj, world, logger)
    if not result.success:
        return f"{FORMAT_ERROR}{MSG_CONTAINER_EMPTY.format(name=src_obj.name)}{FORMAT_RESET}"
    return f"{FORMAT_HIGHLIGHT}{result.message}{FORMAT_RESET}"

@command("setamount", ["cycle"], "interaction",
         "Switch to the container's next transfer amount.\nUsage: setamount <container>")
def setamount_handler(args, context):
    world = context["world"]
    logger = context.get("logger") or Logger
    if not args: return f"{FORMAT_ERROR}Adjust what?{FORMAT_RESET}"

    name = " ".join(args)
    target: Optional[GameObject] = world.find_object(name)
    if not target: return f"{FORMAT_ERROR}You don't see '{name}' here.{FORMAT_RESET}"
    if target.container is None or not amount_cycler.can_cycle(target.container):
        return f"{FORMAT_ERROR}The {target.name}'s transfer amount can't be changed.{FORMAT_RESET}"

    new_amount = amount_cycler.cycle(target.container, logger)
    return f"{FORMAT_HIGHLIGHT}{MSG_TRANSFER_AMOUNT_CHANGED.format(name=target.name, amount=format_amount(new_amount))}{FORMAT_RESET}"
