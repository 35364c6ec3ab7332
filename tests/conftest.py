"""
Basic test fixtures for the skirmish test suite.

Provides small boards, scripted players and unit factories shared by the
unit and integration tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from skirmish.core.data import ACTION_DATA, GRASS, Position
from skirmish.core.events.event_manager import EventManager
from skirmish.core.palette_loader import PaletteLoader
from skirmish.game.board import Board
from skirmish.game.entities.unit import Unit
from skirmish.game.players.scripted import ScriptedPlayer


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def palette():
    """The built-in palette, independent of any assets on disk."""
    return PaletteLoader(palette_path="does/not/exist.yaml").load_palette()


@pytest.fixture
def board():
    """Create a 5x5 grass board."""
    return Board.filled(5, 5, GRASS)


@pytest.fixture
def red():
    return ScriptedPlayer("Red")


@pytest.fixture
def blue():
    return ScriptedPlayer("Blue")


@pytest.fixture
def make_unit():
    """Factory for detached units with sensible defaults."""
    def _make_unit(owner, name="Unit", health=10, movement=3, power=4, actions=("Slash",)):
        return Unit(
            name,
            owner,
            health=health,
            movement=movement,
            power=power,
            actions=[ACTION_DATA[action] for action in actions],
        )
    return _make_unit


@pytest.fixture
def center():
    return Position(2, 2)
