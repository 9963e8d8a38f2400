"""Charge tracker - the two-step "charge, then release" move lifecycle.

Per side the slot moves idle -> charging (turns_left > 0) -> ready
(turns_left == 0) -> idle again once the stored move is released.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from .events import BattleEvent, EventType
from .types import BattleState, ChargeState, Move, Side


@dataclass(frozen=True)
class ChargeStart:
    state: BattleState
    started: bool
    events: list[BattleEvent] = field(default_factory=list)


@dataclass(frozen=True)
class ChargeTick:
    state: BattleState
    ready: bool


@dataclass(frozen=True)
class ChargeRelease:
    state: BattleState
    move: Move | None
    events: list[BattleEvent] = field(default_factory=list)


class ChargeTracker:
    """Manages the one pending charge slot each side has."""

    def get_charge(self, state: BattleState, side: Side) -> ChargeState | None:
        return state.charge(side)

    def set_charge(self, state: BattleState, side: Side, charge: ChargeState | None) -> BattleState:
        return state.with_charge(side, charge)

    def maybe_start_charge(self, state: BattleState, side: Side, move: Move) -> ChargeStart:
        """Start charging if the move needs it and nothing is pending for the side."""
        turns = move.charge_turns or 0
        if turns <= 0 or self.get_charge(state, side) is not None:
            return ChargeStart(state=state, started=False)

        charge = ChargeState(move_id=move.id, turns_left=turns)
        event = BattleEvent(
            event_type=EventType.CHARGE_STARTED,
            side=side,
            move_id=move.id,
            move_name=move.name,
            turns=turns,
        )
        return ChargeStart(state=self.set_charge(state, side, charge), started=True, events=[event])

    def tick_charge(self, state: BattleState, side: Side) -> ChargeTick:
        """Count one turn off the side's charge, if there is one."""
        current = self.get_charge(state, side)
        if current is None:
            return ChargeTick(state=state, ready=False)

        remaining = max(0, current.turns_left - 1)
        updated = ChargeState(move_id=current.move_id, turns_left=remaining)
        return ChargeTick(state=self.set_charge(state, side, updated), ready=remaining == 0)

    def maybe_release_charge(
        self,
        state: BattleState,
        side: Side,
        resolve_move: Callable[[str], Move | None],
    ) -> ChargeRelease:
        """Release a completed charge.

        Clears the slot and hands back the stored move, resolved through
        ``resolve_move``. A stored id that no longer resolves still clears the
        slot, with no move and no event.
        """
        current = self.get_charge(state, side)
        if current is None or current.turns_left > 0:
            return ChargeRelease(state=state, move=None)

        move = resolve_move(current.move_id)
        cleared = self.set_charge(state, side, None)
        if move is None:
            return ChargeRelease(state=cleared, move=None)

        event = BattleEvent(
            event_type=EventType.CHARGE_RELEASED,
            side=side,
            move_id=move.id,
            move_name=move.name,
        )
        return ChargeRelease(state=cleared, move=move, events=[event])
