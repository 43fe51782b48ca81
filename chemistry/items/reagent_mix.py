# chemistry/items/reagent_mix.py
from typing import Dict, Iterable, Optional, Tuple

from chemistry.config import REAGENT_EPSILON

class ReagentMix:
    """
    A quantity of substance, stored as reagent id -> volume.

    Volumes are plain floats. Operations keep the mix free of zero or negative
    entries so `total` is always the sum of positive volumes.
    """
    def __init__(self, reagents: Optional[Dict[str, float]] = None):
        self.reagents: Dict[str, float] = {}
        if reagents:
            for reagent_id, amount in reagents.items():
                self._put(reagent_id, amount)

    def _put(self, reagent_id: str, amount: float):
        if amount <= 0:
            return
        self.reagents[reagent_id] = self.reagents.get(reagent_id, 0.0) + amount

    @property
    def total(self) -> float:
        return sum(self.reagents.values())

    def is_empty(self) -> bool:
        return self.total <= REAGENT_EPSILON

    def amount_of(self, reagent_id: str) -> float:
        return self.reagents.get(reagent_id, 0.0)

    def reagent_ids(self) -> Tuple[str, ...]:
        return tuple(self.reagents)

    def copy(self) -> 'ReagentMix':
        return ReagentMix(dict(self.reagents))

    def add(self, other: 'ReagentMix') -> None:
        """Merge another mix into this one. `other` is left untouched."""
        for reagent_id, amount in other.reagents.items():
            self._put(reagent_id, amount)

    def take(self, amount: float) -> 'ReagentMix':
        """
        Remove up to `amount` units, proportionally across all reagents.
        Returns the removed portion; never more than was present.
        """
        total = self.total
        if amount <= 0 or total <= 0:
            return ReagentMix()

        if amount >= total:
            taken = ReagentMix(self.reagents)
            self.reagents.clear()
            return taken

        ratio = amount / total
        taken = ReagentMix()
        for reagent_id in list(self.reagents):
            portion = self.reagents[reagent_id] * ratio
            taken._put(reagent_id, portion)
            remaining = self.reagents[reagent_id] - portion
            if remaining > 0:
                self.reagents[reagent_id] = remaining
            else:
                del self.reagents[reagent_id]
        return taken

    def remove_reagents(self, reagent_ids: Iterable[str]) -> 'ReagentMix':
        """Pull every listed reagent out entirely, returning them as a new mix."""
        removed = ReagentMix()
        for reagent_id in reagent_ids:
            amount = self.reagents.pop(reagent_id, 0.0)
            removed._put(reagent_id, amount)
        return removed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReagentMix):
            return NotImplemented
        return self.reagents == other.reagents

    def __contains__(self, reagent_id: object) -> bool:
        return reagent_id in self.reagents

    def __repr__(self) -> str:
        contents = ", ".join(f"{rid}: {amt:.2f}" for rid, amt in self.reagents.items())
        return f"ReagentMix({{{contents}}})"
