"""Turn resolver - resolves one side's turn as a pure state transition."""

import math
import random
from dataclasses import dataclass, field

from .charge import ChargeTracker
from .effects import (
    EffectApplicator,
    defense_ignore_pct,
    has_enemy_effect,
    has_high_crit,
    is_self_only,
    normalize_move_effects,
)
from .events import BattleEvent, EventType
from .formulas import (
    adjusted_accuracy,
    apply_hp_cost,
    apply_recoil,
    compute_damage,
    roll_crit,
    roll_hit,
)
from .types import RNG, BattleCharacter, BattleState, Character, Move, Side, StatusName

PARALYSIS_BLOCK_CHANCE = 0.25
THAW_CHANCE = 0.20


@dataclass(frozen=True)
class TurnResult:
    """The state after a turn and the ordered events that produced it."""

    state: BattleState
    events: list[BattleEvent] = field(default_factory=list)

    def events_of(self, event_type: EventType) -> list[BattleEvent]:
        """Get all events of one type, in order."""
        return [e for e in self.events if e.event_type == event_type]


def create_battle_character(character: Character) -> BattleCharacter:
    """Snapshot a catalog character for battle: full hp, zero stages, no status."""
    return BattleCharacter(
        id=character.id,
        name=character.name,
        sprite=character.sprite,
        hp=character.hp,
        max_hp=character.hp,
        base_attack=character.attack,
        base_defense=character.defense,
        moves=tuple(character.moves),
    )


def initialize_battle_state(player: Character, opponent: Character) -> BattleState:
    """Build the opening state. The player always acts first."""
    return BattleState(
        player=create_battle_character(player),
        opponent=create_battle_character(opponent),
        player_charge=None,
        opponent_charge=None,
        turn=Side.PLAYER,
    )


class TurnResolver:
    """Resolves a single actor's turn.

    The resolver is total over its inputs: an unknown move id, a missing
    choice or a move with nothing to do all resolve as quiet turns. Every
    result starts with ``turn_start``, ends with ``turn_end`` and hands the
    turn to the other side, whichever branch ended it.
    """

    def __init__(self) -> None:
        self.applicator = EffectApplicator()
        self.charges = ChargeTracker()

    def take_turn(
        self,
        state: BattleState,
        side: Side,
        chosen_move_id: str | None = None,
        rng: RNG | None = None,
    ) -> TurnResult:
        """Resolve one turn for ``side``.

        Turn flow:
        1. Invulnerability held by the actor counts down
        2. A pending charge ticks; still charging ends the turn
        3. A completed charge releases its stored move, overriding the choice
        4. Otherwise the chosen move is looked up; charge moves start charging
        5. HP cost is paid up front and may faint the actor
        6. Paralysis or freeze may block the action
        7. Moves whose effects all target the user skip accuracy and damage
        8. Accuracy, crit, then the hit loop against the defender
        9. On-hit debuffs and statuses, recoil, faint checks

        Args:
            state: Current battle snapshot (not modified)
            side: Acting side
            chosen_move_id: Move picked for this turn, if any
            rng: Random source; defaults to the platform RNG

        Returns:
            TurnResult with the next snapshot and the ordered events
        """
        roll = rng or random.random
        events: list[BattleEvent] = [BattleEvent(event_type=EventType.TURN_START, side=side)]

        state = self._count_down_invulnerability(state, side)

        # Charge continuation
        ticked = self.charges.tick_charge(state, side)
        state = ticked.state
        charge = state.charge(side)
        if charge is not None and charge.turns_left > 0:
            events.append(
                BattleEvent(
                    event_type=EventType.CHARGE_TICKED,
                    side=side,
                    move_id=charge.move_id,
                    turns=charge.turns_left,
                )
            )
            return self._finish(state, side, events)

        # Charge release
        actor = state.combatant(side)
        released = self.charges.maybe_release_charge(state, side, actor.get_move)
        state = released.state
        events.extend(released.events)

        move = released.move
        if move is None:
            move = actor.get_move(chosen_move_id)
            if move is None:
                return self._finish(state, side, events)
            events.append(self._move_selected(side, move))

            started = self.charges.maybe_start_charge(state, side, move)
            if started.started:
                events.extend(started.events)
                return self._finish(started.state, side, events)
        else:
            events.append(self._move_selected(side, move))

        # HP cost is paid before status gating
        if move.hp_cost and move.hp_cost > 0:
            actor = state.combatant(side)
            cost = apply_hp_cost(actor.hp, move.hp_cost)
            state = state.with_combatant(side, actor.with_hp(cost.hp))
            events.append(
                BattleEvent(
                    event_type=EventType.HP_COST_PAID,
                    side=side,
                    amount=math.floor(move.hp_cost),
                    remaining_hp=cost.hp,
                )
            )
            if cost.fainted:
                events.append(BattleEvent(event_type=EventType.FAINT, side=side))
                return self._finish(state, side, events)

        # Status gating
        actor = state.combatant(side)
        if actor.status.paralyze and roll() < PARALYSIS_BLOCK_CHANCE:
            events.append(BattleEvent(event_type=EventType.STATUS_BLOCKED, side=side, status=StatusName.PARALYZE))
            return self._finish(state, side, events)

        if actor.status.freeze:
            if roll() < THAW_CHANCE:
                state = state.with_combatant(side, actor.with_status(freeze=False))
                events.append(
                    BattleEvent(
                        event_type=EventType.STATUS_BLOCKED,
                        side=side,
                        status=StatusName.FREEZE,
                        thawed=True,
                    )
                )
            else:
                events.append(BattleEvent(event_type=EventType.STATUS_BLOCKED, side=side, status=StatusName.FREEZE))
                return self._finish(state, side, events)

        effects = normalize_move_effects(move)

        # Self-only moves never roll accuracy or deal damage
        if is_self_only(effects):
            state, self_events = self._apply_self_effects(state, side, move, roll)
            events.extend(self_events)
            return self._finish(state, side, events)

        # Accuracy
        attacker = state.combatant(side)
        defender = state.combatant(side.other)
        accuracy = adjusted_accuracy(move.accuracy, attacker.stages.accuracy)
        hit = roll_hit(accuracy, roll)
        events.append(BattleEvent(event_type=EventType.ACCURACY_CHECK, side=side, accuracy=accuracy, hit=hit))
        if not hit:
            events.append(BattleEvent(event_type=EventType.MISS, side=side))
            return self._finish(state, side, events)

        # Crit
        is_crit = roll_crit(has_high_crit(move, effects), roll)
        if is_crit:
            events.append(BattleEvent(event_type=EventType.CRIT, side=side))

        # Hit loop
        defender_hp, damaging_hits, hit_events = self._resolve_hits(
            attacker, defender, move, side, is_crit, defense_ignore_pct(effects)
        )
        events.extend(hit_events)
        state = state.with_combatant(side.other, defender.with_hp(defender_hp))

        # The attack connected; it lands when it dealt power damage or carries an enemy effect
        hit_landed = move.power > 0 or has_enemy_effect(effects)
        if hit_landed:
            state, landed_events = self._apply_on_hit_effects(state, side, move, roll)
            events.extend(landed_events)

        # Recoil needs at least one damaging hit
        if damaging_hits > 0 and move.recoil_damage and move.recoil_damage > 0:
            attacker = state.combatant(side)
            recoil = apply_recoil(attacker.hp, move.recoil_damage)
            state = state.with_combatant(side, attacker.with_hp(recoil.hp))
            events.append(
                BattleEvent(
                    event_type=EventType.RECOIL,
                    side=side,
                    amount=math.floor(move.recoil_damage),
                    new_hp=recoil.hp,
                )
            )
            if recoil.fainted:
                events.append(BattleEvent(event_type=EventType.FAINT, side=side))

        if state.combatant(side.other).hp == 0:
            events.append(BattleEvent(event_type=EventType.FAINT, side=side.other))

        return self._finish(state, side, events)

    def _resolve_hits(
        self,
        attacker: BattleCharacter,
        defender: BattleCharacter,
        move: Move,
        side: Side,
        is_crit: bool,
        ignore_pct: float | None,
    ) -> tuple[int, int, list[BattleEvent]]:
        """Run the multi-hit loop.

        Returns:
            (defender hp afterwards, number of damaging hits, events)
        """
        events: list[BattleEvent] = []
        remaining_hp = defender.hp
        damaging_hits = 0
        total_hits = max(1, math.floor(move.hits or 1))
        multi_hit = total_hits > 1

        for index in range(total_hits):
            if move.power <= 0:
                continue
            if defender.status.is_invulnerable:
                events.append(BattleEvent(event_type=EventType.INVULNERABLE_BLOCK, side=side, target=side.other))
                continue

            damage = compute_damage(
                attacker.base_attack,
                attacker.stages.attack,
                defender.base_defense,
                defender.stages.defense,
                move.power,
                is_crit,
                ignore_pct,
            )
            remaining_hp = max(0, remaining_hp - damage)
            damaging_hits += 1
            events.append(
                BattleEvent(
                    event_type=EventType.DAMAGE,
                    side=side,
                    target=side.other,
                    amount=damage,
                    remaining_hp=remaining_hp,
                    hit_index=index + 1 if multi_hit else None,
                    total_hits=total_hits if multi_hit else None,
                )
            )
            if remaining_hp == 0:
                break

        return remaining_hp, damaging_hits, events

    def _apply_self_effects(
        self,
        state: BattleState,
        side: Side,
        move: Move,
        roll: RNG,
    ) -> tuple[BattleState, list[BattleEvent]]:
        events: list[BattleEvent] = []
        actor, stat_events = self.applicator.apply_stat_changes(state.combatant(side), move, side)
        events.extend(stat_events)

        actor, target, status_events = self.applicator.apply_statuses(
            actor, state.combatant(side.other), move, side, side.other, False, roll
        )
        events.extend(status_events)
        state = state.with_combatant(side, actor).with_combatant(side.other, target)
        return state, events

    def _apply_on_hit_effects(
        self,
        state: BattleState,
        side: Side,
        move: Move,
        roll: RNG,
    ) -> tuple[BattleState, list[BattleEvent]]:
        """Target debuffs and statuses. Self stat effects only apply on self-only moves."""
        events: list[BattleEvent] = []
        actor = state.combatant(side)
        target, debuff_events = self.applicator.apply_enemy_debuffs(state.combatant(side.other), move, side.other)
        events.extend(debuff_events)

        actor, target, status_events = self.applicator.apply_statuses(
            actor, target, move, side, side.other, True, roll
        )
        events.extend(status_events)
        state = state.with_combatant(side, actor).with_combatant(side.other, target)
        return state, events

    @staticmethod
    def _count_down_invulnerability(state: BattleState, side: Side) -> BattleState:
        """Invulnerability covers the opponent turns between two of the holder's turns."""
        actor = state.combatant(side)
        if not actor.status.is_invulnerable:
            return state
        return state.with_combatant(side, actor.with_status(invulnerable_turns=actor.status.invulnerable_turns - 1))

    @staticmethod
    def _move_selected(side: Side, move: Move) -> BattleEvent:
        return BattleEvent(event_type=EventType.MOVE_SELECTED, side=side, move_id=move.id, move_name=move.name)

    @staticmethod
    def _finish(state: BattleState, side: Side, events: list[BattleEvent]) -> TurnResult:
        events.append(BattleEvent(event_type=EventType.TURN_END, side=side))
        return TurnResult(state=state.end_turn(side), events=events)


_default_resolver = TurnResolver()


def take_turn(
    state: BattleState,
    side: Side,
    chosen_move_id: str | None = None,
    rng: RNG | None = None,
) -> TurnResult:
    """Resolve one turn with the shared resolver. See ``TurnResolver.take_turn``."""
    return _default_resolver.take_turn(state, side, chosen_move_id, rng)
