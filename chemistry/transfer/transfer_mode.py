# chemistry/transfer/transfer_mode.py
from typing import Dict, Tuple

class TransferMode:
    NORMAL = 0 # Output from your hand, unless the other side declares a stricter role
    SYRINGE = 1 # Draws in while not full, outputs once full
    OUTPUT_ONLY = 2
    INPUT_ONLY = 3
    NO_TRANSFER = 4

    ALL: Tuple[int, ...] = (NORMAL, SYRINGE, OUTPUT_ONLY, INPUT_ONLY, NO_TRANSFER)

    NAMES: Dict[int, str] = {
        NORMAL: "Normal",
        SYRINGE: "Syringe",
        OUTPUT_ONLY: "OutputOnly",
        INPUT_ONLY: "InputOnly",
        NO_TRANSFER: "NoTransfer",
    }

    @classmethod
    def name_of(cls, mode: int) -> str:
        return cls.NAMES.get(mode, f"Unknown({mode})")

    @classmethod
    def from_name(cls, name: str) -> int:
        """Parse 'OutputOnly', 'output_only' or 'output only' into a mode constant."""
        key = name.replace("_", "").replace(" ", "").lower()
        for mode, mode_name in cls.NAMES.items():
            if mode_name.lower() == key:
                return mode
        raise ValueError(f"Unknown transfer mode: '{name}'")
