"""Type definitions for the battle engine.

Everything here is frozen. Turn resolution never mutates a value in place;
it builds the next snapshot with ``dataclasses.replace`` so the state before
a turn and the state after it never share mutable parts.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum

# Zero-argument callable returning a float in [0, 1)
RNG = Callable[[], float]


class Side(str, Enum):
    """Which combatant is acting."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        """The opposing side."""
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class StatName(str, Enum):
    """Stats that can carry a stage modifier."""

    ATTACK = "attack"
    DEFENSE = "defense"
    ACCURACY = "accuracy"
    HP = "hp"  # Present on the stage table, never targeted by an effect


class EffectType(str, Enum):
    """Effect types a move can declare."""

    ATTACK_UP = "attack_up"
    DEFENSE_UP = "defense_up"
    ACCURACY_UP = "accuracy_up"
    SELF_DEFENSE_DOWN = "self_defense_down"
    ENEMY_ATTACK_DOWN = "enemy_attack_down"
    ENEMY_DEFENSE_DOWN = "enemy_defense_down"
    ACCURACY_DOWN = "accuracy_down"
    DEFENSE_DOWN = "defense_down"  # Legacy catalog value, has no handler
    INVULNERABLE = "invulnerable"
    HEAL = "heal"
    PARALYZE = "paralyze"
    FREEZE = "freeze"
    DEFENSE_IGNORE = "defense_ignore"
    HIGH_CRIT_CHANCE = "highCritChance"


class StatusName(str, Enum):
    """Statuses that can be applied or that can block an action."""

    PARALYZE = "paralyze"
    FREEZE = "freeze"
    INVULNERABLE = "invulnerable"


@dataclass(frozen=True)
class MoveEffect:
    """One entry of a move's composite ``effects`` list.

    ``type`` is kept as a plain string so catalog values the engine does not
    model survive normalization and are ignored downstream.
    """

    type: str
    value: float | None = None
    chance: float | None = None
    turns: int | None = None


@dataclass(frozen=True)
class Move:
    """A move from the catalog. Either the legacy ``effect`` field or the
    composite ``effects`` tuple may be set; see ``effects.normalize_move_effects``."""

    id: str
    name: str
    power: float
    accuracy: float
    effect: str | None = None
    value: float | None = None
    chance: float | None = None
    turns: int | None = None
    effects: tuple[MoveEffect, ...] | None = None
    recoil_damage: float | None = None
    hp_cost: float | None = None
    hits: int | None = None
    high_crit_chance: bool = False
    charge_turns: int | None = None


@dataclass(frozen=True)
class Character:
    """A catalog entry: base stats and exactly four moves."""

    id: str
    name: str
    sprite: str
    hp: int
    attack: int
    defense: int
    moves: tuple[Move, ...]


@dataclass(frozen=True)
class StatStages:
    """Stage modifiers, each clamped to [-6, 6] by the code that changes them."""

    attack: int = 0
    defense: int = 0
    accuracy: int = 0
    hp: int = 0

    def get(self, stat: StatName) -> int:
        """Get the stage for a stat."""
        return getattr(self, stat.value)

    def with_stage(self, stat: StatName, stage: int) -> "StatStages":
        """Return a copy with one stage replaced."""
        return replace(self, **{stat.value: stage})


@dataclass(frozen=True)
class StatusState:
    """Status flags and durations for a combatant."""

    paralyze: bool = False
    freeze: bool = False
    invulnerable_turns: int = 0

    @property
    def is_invulnerable(self) -> bool:
        return self.invulnerable_turns > 0


@dataclass(frozen=True)
class BattleCharacter:
    """A combatant during a battle.

    ``base_attack`` and ``base_defense`` are snapshotted at battle start and
    never change; every modifier goes through ``stages``.
    """

    id: str
    name: str
    sprite: str
    hp: int
    max_hp: int
    base_attack: int
    base_defense: int
    moves: tuple[Move, ...]
    stages: StatStages = field(default_factory=StatStages)
    status: StatusState = field(default_factory=StatusState)

    def is_alive(self) -> bool:
        """Check if the combatant is still standing."""
        return self.hp > 0

    def get_move(self, move_id: str | None) -> Move | None:
        """Find one of this combatant's moves by id."""
        if not move_id:
            return None
        for move in self.moves:
            if move.id == move_id:
                return move
        return None

    def with_hp(self, hp: int) -> "BattleCharacter":
        return replace(self, hp=hp)

    def with_stages(self, stages: StatStages) -> "BattleCharacter":
        return replace(self, stages=stages)

    def with_status(self, **changes: object) -> "BattleCharacter":
        return replace(self, status=replace(self.status, **changes))


@dataclass(frozen=True)
class ChargeState:
    """A pending charge move for one side."""

    move_id: str
    turns_left: int


@dataclass(frozen=True)
class BattleState:
    """The entire resolvable battle snapshot."""

    player: BattleCharacter
    opponent: BattleCharacter
    player_charge: ChargeState | None = None
    opponent_charge: ChargeState | None = None
    turn: Side = Side.PLAYER

    def combatant(self, side: Side) -> BattleCharacter:
        """Get the combatant on a side."""
        return self.player if side is Side.PLAYER else self.opponent

    def with_combatant(self, side: Side, combatant: BattleCharacter) -> "BattleState":
        """Return a new state with one combatant replaced."""
        if side is Side.PLAYER:
            return replace(self, player=combatant)
        return replace(self, opponent=combatant)

    def charge(self, side: Side) -> ChargeState | None:
        """Get the pending charge for a side."""
        return self.player_charge if side is Side.PLAYER else self.opponent_charge

    def with_charge(self, side: Side, charge: ChargeState | None) -> "BattleState":
        """Return a new state with one charge slot replaced."""
        if side is Side.PLAYER:
            return replace(self, player_charge=charge)
        return replace(self, opponent_charge=charge)

    def end_turn(self, side: Side) -> "BattleState":
        """Hand the turn to the other side."""
        return replace(self, turn=side.other)

    @property
    def is_over(self) -> bool:
        """True once either combatant has fainted."""
        return not (self.player.is_alive() and self.opponent.is_alive())
