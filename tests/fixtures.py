# tests/fixtures.py
import unittest
import sys
import os
from typing import Dict, Iterable, List, Optional, Tuple

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'chemistry'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from chemistry.game_object import GameObject, SpillRecipient
from chemistry.items.reagent_container import ContainerConfig, ReagentContainer
from chemistry.items.reagent_mix import ReagentMix
from chemistry.transfer.transfer_mode import TransferMode
from chemistry.world import World

class RecordingLogger:
    """
    A logger that keeps (level, source, message) tuples instead of printing,
    so tests can assert on diagnostics.
    """
    def __init__(self):
        self.records: List[Tuple[str, str, str]] = []

    def _record(self, level: str, source: str, message: str):
        self.records.append((level, source, message))

    def trace(self, source: str, message: str): self._record("trace", source, message)
    def debug(self, source: str, message: str): self._record("debug", source, message)
    def info(self, source: str, message: str): self._record("info", source, message)
    def warning(self, source: str, message: str): self._record("warning", source, message)
    def error(self, source: str, message: str): self._record("error", source, message)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, _, message in self.records if lvl == level]

def make_container(mode: int = TransferMode.NORMAL, contents: Optional[Dict[str, float]] = None,
                   capacity: float = 100.0, transfer_amount: float = 20.0,
                   presets: Iterable[float] = (), reagent_whitelist: Iterable[str] = (),
                   trait_whitelist: Iterable[str] = ()) -> ReagentContainer:
    config = ContainerConfig(
        capacity=capacity, transfer_mode=mode, transfer_amount=transfer_amount,
        possible_transfer_amounts=tuple(presets), reagent_whitelist=frozenset(reagent_whitelist),
        trait_whitelist=frozenset(trait_whitelist)
    )
    return ReagentContainer(config, ReagentMix(contents))

def make_object(name: str, container: Optional[ReagentContainer] = None,
                traits: Iterable[str] = (), world_pos: Optional[Tuple[int, int]] = None) -> GameObject:
    recipient = SpillRecipient(world_pos) if world_pos is not None else None
    return GameObject(obj_id=name.lower().replace(" ", "_"), name=name,
                      container=container, recipient=recipient, traits=traits)

class ChemistryTestBase(unittest.TestCase):
    """Base class for chemistry tests: a fresh world and a recording logger."""

    def setUp(self):
        self.world = World()
        self.logger = RecordingLogger()

    def add_container(self, name: str, **kwargs) -> GameObject:
        traits = kwargs.pop("traits", ())
        return self.world.add_object(make_object(name, make_container(**kwargs), traits=traits))

    def assertVolume(self, container: ReagentContainer, expected: float, places: int = 6):
        self.assertAlmostEqual(container.current_volume, expected, places=places)
