# chemistry/transfer/direction_resolver.py
"""
Decides which of two containers receives reagents, given their transfer modes.

Rows are the mode of `one` (the held container), columns the mode of `two`:

    one \\ two   | Normal | Syringe | OutputOnly | InputOnly | NoTransfer
    Normal      | two    | invalid | one        | two       | invalid
    Syringe     | *      | invalid | one        | two       | invalid
    OutputOnly  | two    | invalid | blocked    | two       | invalid
    InputOnly   | one    | invalid | one        | blocked   | invalid
    NoTransfer  | invalid everywhere

    * one if it is not full yet, otherwise two
"""
from dataclasses import dataclass
from typing import Union

from chemistry.config import BLOCKED_BOTH_INPUT_ONLY, BLOCKED_BOTH_OUTPUT_ONLY, LOG_SOURCE_CHEMISTRY
from chemistry.transfer.transfer_mode import TransferMode
from chemistry.utils.logger import Logger

ONE = "one"
TWO = "two"

@dataclass(frozen=True)
class TransferTo:
    receiver: str # ONE or TWO

@dataclass(frozen=True)
class BothBlocked:
    reason: str # Player-facing; a legitimate state, not a misconfiguration

@dataclass(frozen=True)
class Invalid:
    detail: str = ""

Outcome = Union[TransferTo, BothBlocked, Invalid]

# Fixed cells of the table. Syringe x Normal depends on fill state and is handled in resolve().
_DIRECTION_TABLE = {
    (TransferMode.NORMAL, TransferMode.NORMAL): TransferTo(TWO),
    (TransferMode.NORMAL, TransferMode.OUTPUT_ONLY): TransferTo(ONE),
    (TransferMode.NORMAL, TransferMode.INPUT_ONLY): TransferTo(TWO),
    (TransferMode.SYRINGE, TransferMode.OUTPUT_ONLY): TransferTo(ONE),
    (TransferMode.SYRINGE, TransferMode.INPUT_ONLY): TransferTo(TWO),
    (TransferMode.OUTPUT_ONLY, TransferMode.NORMAL): TransferTo(TWO),
    (TransferMode.OUTPUT_ONLY, TransferMode.OUTPUT_ONLY): BothBlocked(BLOCKED_BOTH_OUTPUT_ONLY),
    (TransferMode.OUTPUT_ONLY, TransferMode.INPUT_ONLY): TransferTo(TWO),
    (TransferMode.INPUT_ONLY, TransferMode.NORMAL): TransferTo(ONE),
    (TransferMode.INPUT_ONLY, TransferMode.OUTPUT_ONLY): TransferTo(ONE),
    (TransferMode.INPUT_ONLY, TransferMode.INPUT_ONLY): BothBlocked(BLOCKED_BOTH_INPUT_ONLY),
}

class DirectionResolver:
    def __init__(self, logger=None):
        self.logger = logger or Logger

    def resolve(self, one_mode: int, two_mode: int, one_is_full: bool = False) -> Outcome:
        if one_mode == TransferMode.SYRINGE and two_mode == TransferMode.NORMAL:
            return TransferTo(TWO if one_is_full else ONE)

        outcome = _DIRECTION_TABLE.get((one_mode, two_mode))
        if outcome is not None:
            return outcome

        detail = (f"Invalid transfer mode when attempting transfer "
                  f"{TransferMode.name_of(one_mode)}<->{TransferMode.name_of(two_mode)}")
        self.logger.error(LOG_SOURCE_CHEMISTRY, detail)
        return Invalid(detail)
