# chemistry/game_object.py
import uuid
from typing import Iterable, Optional, Set, Tuple

from chemistry.items.reagent_container import ReagentContainer

class SpillRecipient:
    """Capability of an entity that can be doused: it has a spot in the world to splash onto."""
    def __init__(self, world_pos: Tuple[int, int] = (0, 0)):
        self.world_pos = world_pos

class GameObject:
    """
    Anything in the world a player can point at.

    Capabilities are optional typed attributes rather than component lookups:
    `container` for things that hold reagents, `recipient` for things that can
    be splashed, and `traits` for whitelist checks.
    """
    def __init__(self, obj_id: Optional[str] = None, name: str = "Unknown",
                 container: Optional[ReagentContainer] = None,
                 recipient: Optional[SpillRecipient] = None,
                 traits: Optional[Iterable[str]] = None):
        self.obj_id = obj_id if obj_id else f"{self.__class__.__name__.lower()}_{uuid.uuid4().hex[:8]}"
        self.name = name
        self.traits: Set[str] = set(traits or [])
        self.recipient = recipient
        self.container = container
        if container is not None:
            container.owner = self

    def has_any_trait(self, traits: Iterable[str]) -> bool:
        """Read-only query used by whitelist checks."""
        return any(trait in self.traits for trait in traits)

    def __repr__(self) -> str:
        return f"GameObject({self.obj_id!r}, {self.name!r})"
