# chemistry/items/reagent_container.py
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Optional, Tuple

from chemistry.config import (
    CONTAINER_DEFAULT_CAPACITY, MSG_CONTAINER_FULL, MSG_REAGENTS_REJECTED, REAGENT_EPSILON,
    TRANSFER_AMOUNT_DEFAULT, TRANSFER_AMOUNT_MAX, TRANSFER_AMOUNT_MIN
)
from chemistry.items.reagent_mix import ReagentMix
from chemistry.transfer.transfer_mode import TransferMode
from chemistry.transfer.transfer_result import TransferResult

if TYPE_CHECKING:
    from chemistry.game_object import GameObject

class ContainerConfigError(ValueError):
    """Raised when a container is configured with values outside their allowed ranges."""

def _check_amount(amount: float, what: str):
    if not TRANSFER_AMOUNT_MIN <= amount <= TRANSFER_AMOUNT_MAX:
        raise ContainerConfigError(
            f"{what} {amount} is outside [{TRANSFER_AMOUNT_MIN}, {TRANSFER_AMOUNT_MAX}]."
        )

@dataclass(frozen=True)
class ContainerConfig:
    capacity: float = CONTAINER_DEFAULT_CAPACITY
    transfer_mode: int = TransferMode.NORMAL
    transfer_amount: float = TRANSFER_AMOUNT_DEFAULT # Initial amount per transfer
    possible_transfer_amounts: Tuple[float, ...] = ()
    reagent_whitelist: FrozenSet[str] = field(default_factory=frozenset) # Empty = anything goes
    trait_whitelist: FrozenSet[str] = field(default_factory=frozenset) # Counterpart needs one of these

    def __post_init__(self):
        # Accept lists/sets from callers but store immutable copies
        object.__setattr__(self, "possible_transfer_amounts", tuple(self.possible_transfer_amounts))
        object.__setattr__(self, "reagent_whitelist", frozenset(self.reagent_whitelist))
        object.__setattr__(self, "trait_whitelist", frozenset(self.trait_whitelist))

        if self.capacity <= 0:
            raise ContainerConfigError(f"Capacity must be positive, got {self.capacity}.")
        if self.transfer_mode not in TransferMode.ALL:
            raise ContainerConfigError(f"Unknown transfer mode {self.transfer_mode}.")
        _check_amount(self.transfer_amount, "Transfer amount")
        for preset in self.possible_transfer_amounts:
            _check_amount(preset, "Preset transfer amount")

    @property
    def trait_whitelist_on(self) -> bool:
        return len(self.trait_whitelist) > 0

    @property
    def reagent_whitelist_on(self) -> bool:
        return len(self.reagent_whitelist) > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContainerConfig':
        mode = data.get("transfer_mode", TransferMode.NORMAL)
        if isinstance(mode, str):
            try:
                mode = TransferMode.from_name(mode)
            except ValueError as e:
                raise ContainerConfigError(str(e)) from e

        return cls(
            capacity=float(data.get("capacity", CONTAINER_DEFAULT_CAPACITY)),
            transfer_mode=mode,
            transfer_amount=float(data.get("transfer_amount", TRANSFER_AMOUNT_DEFAULT)),
            possible_transfer_amounts=tuple(float(a) for a in data.get("possible_transfer_amounts", [])),
            reagent_whitelist=frozenset(data.get("reagent_whitelist", [])),
            trait_whitelist=frozenset(data.get("trait_whitelist", []))
        )

class ReagentContainer:
    """Holds a ReagentMix and the transfer rules for moving it in and out."""
    def __init__(self, config: Optional[ContainerConfig] = None,
                 mix: Optional[ReagentMix] = None,
                 owner: Optional['GameObject'] = None):
        self.config = config or ContainerConfig()
        self.mix = mix if mix is not None else ReagentMix()
        self.owner = owner
        self._transfer_amount = self.config.transfer_amount
        self.lock = threading.RLock()

        if self.mix.total > self.config.capacity + REAGENT_EPSILON:
            raise ContainerConfigError(
                f"Initial contents ({self.mix.total}) exceed capacity ({self.config.capacity})."
            )

    @property
    def name(self) -> str:
        return self.owner.name if self.owner else "container"

    @property
    def transfer_mode(self) -> int:
        return self.config.transfer_mode

    @property
    def capacity(self) -> float:
        return self.config.capacity

    @property
    def possible_transfer_amounts(self) -> Tuple[float, ...]:
        return self.config.possible_transfer_amounts

    @property
    def transfer_amount(self) -> float:
        return self._transfer_amount

    @transfer_amount.setter
    def transfer_amount(self, value: float):
        _check_amount(value, "Transfer amount")
        self._transfer_amount = value

    @property
    def current_volume(self) -> float:
        return self.mix.total

    @property
    def space_left(self) -> float:
        return max(0.0, self.capacity - self.current_volume)

    @property
    def is_empty(self) -> bool:
        return self.current_volume <= REAGENT_EPSILON

    @property
    def is_full(self) -> bool:
        return self.current_volume >= self.capacity - REAGENT_EPSILON

    def take(self, amount: float) -> ReagentMix:
        with self.lock:
            return self.mix.take(amount)

    def add(self, incoming: ReagentMix) -> TransferResult:
        """
        Pour `incoming` into this container.

        Reagents outside the whitelist and anything past capacity come back as
        `excess`. Partial acceptance still counts as success.
        """
        with self.lock:
            offered = incoming.copy()
            excess = ReagentMix()
            rejected_by_whitelist = False

            if self.config.reagent_whitelist_on:
                banned = [rid for rid in offered.reagent_ids() if rid not in self.config.reagent_whitelist]
                if banned:
                    rejected_by_whitelist = True
                    excess.add(offered.remove_reagents(banned))

            if offered.total > self.space_left:
                fits = offered.take(self.space_left)
                excess.add(offered)
                offered = fits

            accepted = offered.total
            if accepted <= REAGENT_EPSILON:
                # Slivers below epsilon are refused too, so a failed add leaves the mix untouched
                excess.add(offered)
                template = MSG_REAGENTS_REJECTED if rejected_by_whitelist else MSG_CONTAINER_FULL
                return TransferResult(False, template.format(name=self.name), 0.0, excess)

            self.mix.add(offered)
            return TransferResult(True, "", accepted, excess)

    def reinstate(self, mix: ReagentMix):
        """Put back material that was just taken out of this container."""
        with self.lock:
            self.mix.add(mix)

    def spill_all(self) -> ReagentMix:
        """Empty the container completely, returning everything it held."""
        with self.lock:
            return self.mix.take(self.mix.total)

    def __repr__(self) -> str:
        return (f"ReagentContainer({self.name!r}, mode={TransferMode.name_of(self.transfer_mode)}, "
                f"{self.current_volume:.2f}/{self.capacity:.2f})")
