"""Battle engine module - turn resolution, effects, charge moves and damage math."""

from .charge import ChargeTracker
from .effects import EffectApplicator, normalize_move_effects
from .events import BattleEvent, EventType
from .logging import BattleLog, TurnRecord, format_events
from .turn import TurnResolver, TurnResult, create_battle_character, initialize_battle_state, take_turn
from .types import (
    RNG,
    BattleCharacter,
    BattleState,
    ChargeState,
    Character,
    EffectType,
    Move,
    MoveEffect,
    Side,
    StatName,
    StatStages,
    StatusName,
    StatusState,
)

__all__ = [
    "create_battle_character",
    "initialize_battle_state",
    "take_turn",
    "TurnResolver",
    "TurnResult",
    "EffectApplicator",
    "normalize_move_effects",
    "ChargeTracker",
    "BattleEvent",
    "EventType",
    "BattleLog",
    "TurnRecord",
    "format_events",
    "RNG",
    "BattleCharacter",
    "BattleState",
    "ChargeState",
    "Character",
    "EffectType",
    "Move",
    "MoveEffect",
    "Side",
    "StatName",
    "StatStages",
    "StatusName",
    "StatusState",
]
