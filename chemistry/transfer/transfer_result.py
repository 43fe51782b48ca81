# chemistry/transfer/transfer_result.py
from dataclasses import dataclass, field

from chemistry.items.reagent_mix import ReagentMix

@dataclass
class TransferResult:
    success: bool
    message: str = "" # Empty means the caller should build its own message
    transfer_amount: float = 0.0
    excess: ReagentMix = field(default_factory=ReagentMix) # Material the receiver refused
