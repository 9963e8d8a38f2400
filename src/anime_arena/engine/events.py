"""Structured battle events - the engine's only output channel.

Every ``take_turn`` call returns an ordered list of these. The order is the
record of what happened; consumers must not reorder it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .types import Side, StatName, StatusName


class EventType(str, Enum):
    """Types of battle events."""

    # Turn lifecycle
    TURN_START = "turn_start"
    TURN_END = "turn_end"
    MOVE_SELECTED = "move_selected"

    # Costs and gating
    HP_COST_PAID = "hp_cost_paid"
    STATUS_BLOCKED = "status_blocked"

    # Charge moves
    CHARGE_STARTED = "charge_started"
    CHARGE_TICKED = "charge_ticked"
    CHARGE_RELEASED = "charge_released"

    # Attack resolution
    ACCURACY_CHECK = "accuracy_check"
    MISS = "miss"
    CRIT = "crit"
    DAMAGE = "damage"
    INVULNERABLE_BLOCK = "invulnerable_block"

    # State changes
    STAT_CHANGE = "stat_change"
    STATUS_APPLIED = "status_applied"
    HEAL = "heal"
    HEAL_BLOCKED = "heal_blocked"
    RECOIL = "recoil"
    FAINT = "faint"


@dataclass(frozen=True)
class BattleEvent:
    """A single battle event.

    ``side`` is always the acting side, except for ``stat_change`` (the side
    whose stage moved) and ``faint`` (the side that fainted). Only the fields
    relevant to the event type are set.
    """

    event_type: EventType
    side: Side

    target: Side | None = None
    move_id: str | None = None
    move_name: str | None = None

    # Amounts
    amount: int | None = None
    remaining_hp: int | None = None
    new_hp: int | None = None

    # Multi-hit
    hit_index: int | None = None
    total_hits: int | None = None

    # Accuracy
    accuracy: float | None = None
    hit: bool | None = None

    # Stages
    stat: StatName | None = None
    change: int | None = None
    new_stage: int | None = None

    # Statuses and charges
    status: StatusName | None = None
    turns: int | None = None
    chance: float | None = None
    thawed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, omitting unset fields."""
        result: dict[str, Any] = {
            "type": self.event_type.value,
            "side": self.side.value,
        }

        if self.target is not None:
            result["target"] = self.target.value
        if self.move_id is not None:
            result["move_id"] = self.move_id
        if self.move_name is not None:
            result["move_name"] = self.move_name
        if self.amount is not None:
            result["amount"] = self.amount
        if self.remaining_hp is not None:
            result["remaining_hp"] = self.remaining_hp
        if self.new_hp is not None:
            result["new_hp"] = self.new_hp
        if self.hit_index is not None:
            result["hit_index"] = self.hit_index
        if self.total_hits is not None:
            result["total_hits"] = self.total_hits
        if self.accuracy is not None:
            result["accuracy"] = self.accuracy
        if self.hit is not None:
            result["hit"] = self.hit
        if self.stat is not None:
            result["stat"] = self.stat.value
        if self.change is not None:
            result["change"] = self.change
        if self.new_stage is not None:
            result["new_stage"] = self.new_stage
        if self.status is not None:
            result["status"] = self.status.value
        if self.turns is not None:
            result["turns"] = self.turns
        if self.chance is not None:
            result["chance"] = self.chance
        if self.thawed is not None:
            result["thawed"] = self.thawed

        return result
