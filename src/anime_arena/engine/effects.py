"""Effect normalizer and applicator - turns move effects into state changes."""

import random

from .events import BattleEvent, EventType
from .formulas import apply_heal, clamp_stage
from .types import RNG, BattleCharacter, EffectType, Move, MoveEffect, Side, StatName, StatusName

DEFAULT_PARALYZE_CHANCE = 0.25
DEFAULT_FREEZE_CHANCE = 0.10

# Effects that only ever touch the user of the move
SELF_TARGETING_EFFECTS = frozenset(
    {
        EffectType.ATTACK_UP.value,
        EffectType.DEFENSE_UP.value,
        EffectType.ACCURACY_UP.value,
        EffectType.INVULNERABLE.value,
        EffectType.HEAL.value,
        EffectType.SELF_DEFENSE_DOWN.value,
    }
)


def normalize_move_effects(move: Move) -> list[MoveEffect]:
    """Return the move's effects as one canonical list.

    A non-empty composite ``effects`` list wins. Otherwise the legacy single
    ``effect`` is wrapped with the move-level ``value``/``chance``/``turns``.
    Moves with neither have no effects.
    """
    if move.effects:
        return list(move.effects)
    if move.effect:
        return [MoveEffect(type=move.effect, value=move.value, chance=move.chance, turns=move.turns)]
    return []


def is_self_only(effects: list[MoveEffect]) -> bool:
    """True when there is at least one effect and every effect targets the user."""
    return bool(effects) and all(_type_of(e) in SELF_TARGETING_EFFECTS for e in effects)


def has_enemy_effect(effects: list[MoveEffect]) -> bool:
    return any(_type_of(e) not in SELF_TARGETING_EFFECTS for e in effects)


def has_high_crit(move: Move, effects: list[MoveEffect]) -> bool:
    """High crit comes from the move flag or a ``highCritChance`` effect."""
    return move.high_crit_chance or any(_type_of(e) == EffectType.HIGH_CRIT_CHANCE.value for e in effects)


def defense_ignore_pct(effects: list[MoveEffect]) -> float | None:
    """Fraction of the defender's defense to bypass, from the first ``defense_ignore`` effect."""
    for effect in effects:
        if _type_of(effect) == EffectType.DEFENSE_IGNORE.value:
            return effect.value
    return None


def _type_of(effect: MoveEffect) -> str:
    # str-valued enums and plain catalog strings compare by value
    return effect.type.value if isinstance(effect.type, EffectType) else str(effect.type)


def _effect_value(effect: MoveEffect, move: Move) -> float:
    if effect.value is not None:
        return effect.value
    if move.value is not None:
        return move.value
    return 0


class EffectApplicator:
    """Applies normalized move effects to combatants.

    Every method returns updated copies plus the events describing the change.
    Effect types a method does not handle are skipped, so nothing here raises
    for unknown catalog values.
    """

    SELF_STAT_EFFECTS: dict[str, tuple[StatName, int]] = {
        EffectType.ATTACK_UP.value: (StatName.ATTACK, 1),
        EffectType.DEFENSE_UP.value: (StatName.DEFENSE, 1),
        EffectType.ACCURACY_UP.value: (StatName.ACCURACY, 1),
        EffectType.SELF_DEFENSE_DOWN.value: (StatName.DEFENSE, -1),
    }

    ENEMY_STAT_EFFECTS: dict[str, StatName] = {
        EffectType.ENEMY_ATTACK_DOWN.value: StatName.ATTACK,
        EffectType.ENEMY_DEFENSE_DOWN.value: StatName.DEFENSE,
        EffectType.ACCURACY_DOWN.value: StatName.ACCURACY,
    }

    def apply_stat_changes(
        self,
        actor: BattleCharacter,
        move: Move,
        side: Side,
    ) -> tuple[BattleCharacter, list[BattleEvent]]:
        """Raise or lower the actor's own stages.

        ``self_defense_down`` always lowers, whatever the sign of its value.
        """
        events: list[BattleEvent] = []
        for effect in normalize_move_effects(move):
            routing = self.SELF_STAT_EFFECTS.get(_type_of(effect))
            if routing is None:
                continue
            steps = int(_effect_value(effect, move))
            if steps == 0:
                continue

            stat, direction = routing
            delta = steps if direction > 0 else -abs(steps)
            actor, event = self._shift_stage(actor, stat, delta, side)
            events.append(event)
        return actor, events

    def apply_enemy_debuffs(
        self,
        target: BattleCharacter,
        move: Move,
        target_side: Side,
    ) -> tuple[BattleCharacter, list[BattleEvent]]:
        """Lower the target's stages. The event carries the target's side."""
        events: list[BattleEvent] = []
        for effect in normalize_move_effects(move):
            stat = self.ENEMY_STAT_EFFECTS.get(_type_of(effect))
            if stat is None:
                continue
            steps = int(_effect_value(effect, move))
            if steps == 0:
                continue

            target, event = self._shift_stage(target, stat, -abs(steps), target_side)
            events.append(event)
        return target, events

    def apply_statuses(
        self,
        actor: BattleCharacter,
        target: BattleCharacter,
        move: Move,
        side: Side,
        target_side: Side,
        hit_landed: bool,
        rng: RNG = random.random,
    ) -> tuple[BattleCharacter, BattleCharacter, list[BattleEvent]]:
        """Apply invulnerability and heals to the actor, and on-hit statuses to the target.

        Paralyze and freeze are only considered when ``hit_landed``; each one
        consumes its own roll.
        """
        events: list[BattleEvent] = []
        for effect in normalize_move_effects(move):
            match _type_of(effect):
                case EffectType.INVULNERABLE.value:
                    actor, event = self._apply_invulnerable(actor, effect, move, side)
                    events.append(event)
                case EffectType.HEAL.value:
                    actor, heal_events = self._apply_heal(actor, effect, move, side)
                    events.extend(heal_events)
                case EffectType.PARALYZE.value:
                    if hit_landed:
                        chance = self._chance(effect, move, DEFAULT_PARALYZE_CHANCE)
                        if rng() < chance:
                            target = target.with_status(paralyze=True)
                            events.append(self._status_event(side, target_side, StatusName.PARALYZE, chance))
                case EffectType.FREEZE.value:
                    if hit_landed:
                        chance = self._chance(effect, move, DEFAULT_FREEZE_CHANCE)
                        if rng() < chance:
                            target = target.with_status(freeze=True)
                            events.append(self._status_event(side, target_side, StatusName.FREEZE, chance))
                case _:
                    # Stage effects, defense_ignore and highCritChance are handled elsewhere
                    pass
        return actor, target, events

    def _shift_stage(
        self,
        combatant: BattleCharacter,
        stat: StatName,
        delta: int,
        side: Side,
    ) -> tuple[BattleCharacter, BattleEvent]:
        new_stage = clamp_stage(combatant.stages.get(stat) + delta)
        updated = combatant.with_stages(combatant.stages.with_stage(stat, new_stage))
        event = BattleEvent(
            event_type=EventType.STAT_CHANGE,
            side=side,
            stat=stat,
            change=delta,
            new_stage=new_stage,
        )
        return updated, event

    def _apply_invulnerable(
        self,
        actor: BattleCharacter,
        effect: MoveEffect,
        move: Move,
        side: Side,
    ) -> tuple[BattleCharacter, BattleEvent]:
        """Refreshing invulnerability keeps the longer duration; it does not stack."""
        if effect.turns is not None:
            requested = effect.turns
        elif move.turns is not None:
            requested = move.turns
        else:
            requested = 1
        turns = max(actor.status.invulnerable_turns, int(requested))
        actor = actor.with_status(invulnerable_turns=turns)
        event = BattleEvent(
            event_type=EventType.STATUS_APPLIED,
            side=side,
            target=side,
            status=StatusName.INVULNERABLE,
            turns=turns,
        )
        return actor, event

    def _apply_heal(
        self,
        actor: BattleCharacter,
        effect: MoveEffect,
        move: Move,
        side: Side,
    ) -> tuple[BattleCharacter, list[BattleEvent]]:
        raw = _effect_value(effect, move)
        if raw <= 0:
            return actor, []
        if actor.hp >= actor.max_hp:
            return actor, [BattleEvent(event_type=EventType.HEAL_BLOCKED, side=side)]

        healed = apply_heal(actor.hp, actor.max_hp, raw)
        event = BattleEvent(
            event_type=EventType.HEAL,
            side=side,
            amount=healed.hp - actor.hp,
            new_hp=healed.hp,
        )
        return actor.with_hp(healed.hp), [event]

    @staticmethod
    def _chance(effect: MoveEffect, move: Move, default: float) -> float:
        if effect.chance is not None:
            return effect.chance
        if move.chance is not None:
            return move.chance
        return default

    @staticmethod
    def _status_event(side: Side, target_side: Side, status: StatusName, chance: float) -> BattleEvent:
        return BattleEvent(
            event_type=EventType.STATUS_APPLIED,
            side=side,
            target=target_side,
            status=status,
            chance=chance,
        )
