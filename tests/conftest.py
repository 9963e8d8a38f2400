"""Shared fixtures for engine and session tests."""

import pytest

from anime_arena.engine.turn import create_battle_character, initialize_battle_state
from anime_arena.engine.types import BattleState, Character, Move, MoveEffect


class ScriptedRNG:
    """Deterministic RNG that returns scripted values in order.

    Once the script runs out, ``fallback`` is returned forever. Every call is
    recorded in ``calls`` so tests can check how many rolls a turn consumed.
    """

    def __init__(self, *values: float, fallback: float = 0.0) -> None:
        self.values = list(values)
        self.fallback = fallback
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.fallback


def always(value: float) -> ScriptedRNG:
    """RNG that returns the same value for every roll."""
    return ScriptedRNG(fallback=value)


def make_move(move_id: str = "m1", name: str = "Strike", power: float = 50, accuracy: float = 1.0, **kwargs) -> Move:
    """Build a move with sensible defaults."""
    if "effects" in kwargs and kwargs["effects"] is not None:
        kwargs["effects"] = tuple(e if isinstance(e, MoveEffect) else MoveEffect(**e) for e in kwargs["effects"])
    return Move(id=move_id, name=name, power=power, accuracy=accuracy, **kwargs)


def make_character(
    character_id: str = "c1",
    name: str = "Fighter",
    hp: int = 100,
    attack: int = 100,
    defense: int = 100,
    moves: list[Move] | None = None,
) -> Character:
    """Build a character; pads the move list to four with filler moves."""
    moves = list(moves or [])
    while len(moves) < 4:
        index = len(moves) + 1
        moves.append(make_move(f"{character_id}-filler{index}", f"Filler {index}", power=10))
    return Character(
        id=character_id,
        name=name,
        sprite=f"{name}.png",
        hp=hp,
        attack=attack,
        defense=defense,
        moves=tuple(moves),
    )


def make_state(player: Character, opponent: Character) -> BattleState:
    return initialize_battle_state(player, opponent)


@pytest.fixture
def strike() -> Move:
    """A plain 50-power, always-accurate attack."""
    return make_move("strike", "Strike", power=50, accuracy=1.0)


@pytest.fixture
def player_character(strike: Move) -> Character:
    return make_character("p", "Hero", hp=100, attack=100, defense=100, moves=[strike])


@pytest.fixture
def opponent_character() -> Character:
    return make_character("o", "Rival", hp=100, attack=100, defense=100, moves=[make_move("jab", "Jab", power=30)])


@pytest.fixture
def battle_state(player_character: Character, opponent_character: Character) -> BattleState:
    return initialize_battle_state(player_character, opponent_character)


@pytest.fixture
def player_combatant(player_character: Character):
    return create_battle_character(player_character)
