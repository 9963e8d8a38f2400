"""Battle log - records turn results and renders them as readable text.

Provides:
- Message formatting for a single turn's events
- A per-battle log of turn records with lookup helpers
- A plain-text rendering of the whole battle
"""

from dataclasses import dataclass, field
from typing import Any

from .events import BattleEvent, EventType
from .types import BattleState, Side, StatusName


def _name(state: BattleState, side: Side) -> str:
    return state.combatant(side).name


def format_event(event: BattleEvent, state: BattleState) -> list[str]:
    """Format one event into zero or more log lines.

    Events with nothing worth telling the player (turn boundaries, accuracy
    checks, charge ticks) produce no lines.
    """
    match event.event_type:
        case EventType.MOVE_SELECTED:
            return [f"{_name(state, event.side)} used {event.move_name}!"]

        case EventType.DAMAGE:
            if event.total_hits and event.total_hits > 1:
                return [f"Hit {event.hit_index}/{event.total_hits}: {event.amount} damage!"]
            return [f"It did {event.amount} damage!"]

        case EventType.MISS:
            return [f"{_name(state, event.side)}'s attack missed!"]

        case EventType.CRIT:
            return ["A critical hit!"]

        case EventType.HP_COST_PAID:
            return [f"{_name(state, event.side)} paid {event.amount} HP to use the move."]

        case EventType.RECOIL:
            return [f"{_name(state, event.side)} took {event.amount} recoil damage."]

        case EventType.STAT_CHANGE:
            direction = "rose" if (event.change or 0) > 0 else "fell"
            stat = event.stat.value if event.stat else "stat"
            return [f"{_name(state, event.side)}'s {stat} {direction}!"]

        case EventType.CHARGE_STARTED:
            return [f"{_name(state, event.side)} is charging up!"]

        case EventType.CHARGE_RELEASED:
            return [f"{_name(state, event.side)} unleashed its charged power!"]

        case EventType.STATUS_BLOCKED:
            name = _name(state, event.side)
            if event.status == StatusName.PARALYZE:
                return [f"{name} is paralyzed and can't move!"]
            if event.thawed:
                return [f"{name} thawed out!"]
            return [f"{name} is frozen solid!"]

        case EventType.INVULNERABLE_BLOCK:
            target = event.target or event.side.other
            return [f"{_name(state, target)} is untouchable!"]

        case EventType.STATUS_APPLIED:
            target = event.target or event.side
            match event.status:
                case StatusName.PARALYZE:
                    return [f"{_name(state, target)} is paralyzed!"]
                case StatusName.FREEZE:
                    return [f"{_name(state, target)} was frozen!"]
                case StatusName.INVULNERABLE:
                    return [f"{_name(state, target)} became invulnerable!"]
            return []

        case EventType.HEAL:
            return [f"{_name(state, event.side)} restored {event.amount} HP."]

        case EventType.HEAL_BLOCKED:
            return [f"{_name(state, event.side)}'s HP is already full."]

        case EventType.FAINT:
            outcome = "You win!" if event.side == Side.OPPONENT else "You lose!"
            return [f"{_name(state, event.side)} fainted!", outcome]

        case _:
            return []


def format_events(events: list[BattleEvent], state: BattleState) -> list[str]:
    """Format a turn's events, in order, into log lines."""
    lines: list[str] = []
    for event in events:
        lines.extend(format_event(event, state))
    return lines


@dataclass
class TurnRecord:
    """One resolved turn: who acted, what happened, and how it reads."""

    turn_number: int
    side: Side
    events: list[BattleEvent]
    messages: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "turn_number": self.turn_number,
            "side": self.side.value,
            "events": [event.to_dict() for event in self.events],
            "messages": list(self.messages),
        }


@dataclass
class BattleLog:
    """Complete log of a battle."""

    player_name: str
    opponent_name: str
    entries: list[TurnRecord] = field(default_factory=list)

    def record(self, side: Side, events: list[BattleEvent], state: BattleState) -> TurnRecord:
        """Append a turn. ``state`` is the snapshot the events produced."""
        entry = TurnRecord(
            turn_number=len(self.entries) + 1,
            side=side,
            events=list(events),
            messages=format_events(events, state),
        )
        self.entries.append(entry)
        return entry

    def get_events_by_type(self, event_type: EventType) -> list[BattleEvent]:
        """Get all events of a specific type across the battle."""
        return [e for entry in self.entries for e in entry.events if e.event_type == event_type]

    def get_entries_for_turn(self, turn_number: int) -> list[TurnRecord]:
        """Get the record(s) for a specific turn number."""
        return [entry for entry in self.entries if entry.turn_number == turn_number]

    def get_entries_for_side(self, side: Side) -> list[TurnRecord]:
        return [entry for entry in self.entries if entry.side == side]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "player": self.player_name,
            "opponent": self.opponent_name,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    def format_readable(self) -> str:
        """Format the log in a human-readable format."""
        lines: list[str] = [f"=== {self.player_name} vs {self.opponent_name} ==="]
        for entry in self.entries:
            actor = self.player_name if entry.side == Side.PLAYER else self.opponent_name
            lines.append(f"\n--- Turn {entry.turn_number} ({actor}) ---")
            if entry.messages:
                lines.extend(f"  {message}" for message in entry.messages)
            else:
                lines.append("  Nothing happened.")
        return "\n".join(lines)
