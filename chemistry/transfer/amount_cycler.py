# chemistry/transfer/amount_cycler.py
from chemistry.config import LOG_SOURCE_CHEMISTRY
from chemistry.items.reagent_container import ReagentContainer
from chemistry.utils.logger import Logger

def can_cycle(container: ReagentContainer) -> bool:
    """The 'change transfer amount' action is only offered when presets exist."""
    return len(container.possible_transfer_amounts) != 0

def cycle(container: ReagentContainer, logger=None) -> float:
    """Step to the next preset transfer amount, wrapping around. Returns the new amount."""
    logger = logger or Logger
    presets = container.possible_transfer_amounts
    if not presets:
        logger.debug(LOG_SOURCE_CHEMISTRY, f"{container!r} has no preset transfer amounts to cycle.")
        return container.transfer_amount

    if container.transfer_amount in presets:
        current_index = presets.index(container.transfer_amount)
        container.transfer_amount = presets[(current_index + 1) % len(presets)]
    else:
        container.transfer_amount = presets[0]
    return container.transfer_amount
