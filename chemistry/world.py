# chemistry/world.py
from typing import Dict, Optional, Tuple

from chemistry.game_object import GameObject
from chemistry.items.reagent_mix import ReagentMix

class World:
    """The objects a player can reach, plus whatever has been spilled on the floor."""
    def __init__(self):
        self.objects: Dict[str, GameObject] = {}
        self.puddles: Dict[Tuple[int, int], ReagentMix] = {}

    def add_object(self, obj: GameObject) -> GameObject:
        self.objects[obj.obj_id] = obj
        return obj

    def find_object(self, name: str) -> Optional[GameObject]:
        """Exact id or name match first, then a partial name match."""
        name_lower = name.lower()
        for obj in self.objects.values():
            if obj.obj_id.lower() == name_lower or obj.name.lower() == name_lower:
                return obj
        for obj in self.objects.values():
            if name_lower in obj.name.lower():
                return obj
        return None

    def spill_at(self, world_pos: Tuple[int, int], mix: ReagentMix):
        self.puddles.setdefault(world_pos, ReagentMix()).add(mix)

    def get_puddle(self, world_pos: Tuple[int, int]) -> ReagentMix:
        return self.puddles.get(world_pos, ReagentMix())
