"""Stage and damage math. Pure functions, no battle state."""

import math
import random
from dataclasses import dataclass

from .types import RNG

MIN_STAGE = -6
MAX_STAGE = 6

MIN_STAT_MULTIPLIER = 0.1
MAX_STAT_MULTIPLIER = 1.25

MIN_ACCURACY = 0.1
MAX_ACCURACY = 1.0

BASE_CRIT_CHANCE = 0.05
HIGH_CRIT_CHANCE = 0.15
CRIT_MULTIPLIER = 1.15

MAX_DEFENSE_IGNORE = 0.95

# Empirical tuning constants, kept exact for balance compatibility
DAMAGE_SCALE = 0.3
DAMAGE_CONSTANT = 0.2


@dataclass(frozen=True)
class HpChange:
    """Result of an hp cost, recoil or heal."""

    hp: int
    fainted: bool


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_stage(stage: int) -> int:
    return int(clamp(stage, MIN_STAGE, MAX_STAGE))


def stage_multiplier(stage: int) -> float:
    """Multiplier for a stat stage.

    Stage s >= 0 gives 1 + 0.5*s, stage s < 0 gives 1 / (1 + 0.5*|s|).
    The result is clamped to [0.1, 1.25], so positive and negative stages
    stop being reciprocals once the clamp engages.
    """
    s = clamp_stage(stage)
    if s >= 0:
        multiplier = 1 + 0.5 * s
    else:
        multiplier = 1 / (1 + 0.5 * abs(s))
    return clamp(multiplier, MIN_STAT_MULTIPLIER, MAX_STAT_MULTIPLIER)


def adjusted_accuracy(base_accuracy: float, accuracy_stage: int) -> float:
    """Move accuracy after the attacker's accuracy stage, within [0.1, 1.0]."""
    return clamp(base_accuracy * stage_multiplier(accuracy_stage), MIN_ACCURACY, MAX_ACCURACY)


def effective_defense(base_defense: float, defense_stage: int, ignore_pct: float | None = None) -> int:
    """Defense after stages and defense-ignore, never below 1."""
    staged = max(1.0, base_defense * stage_multiplier(defense_stage))
    ignore = clamp(ignore_pct or 0.0, 0.0, MAX_DEFENSE_IGNORE)
    return max(1, math.floor(staged * (1 - ignore)))


def effective_attack(base_attack: float, attack_stage: int) -> float:
    return max(1.0, base_attack * stage_multiplier(attack_stage))


def compute_damage(
    attacker_attack: float,
    attack_stage: int,
    defender_defense: float,
    defense_stage: int,
    move_power: float,
    is_crit: bool,
    ignore_pct: float | None = None,
) -> int:
    """Ratio-based damage formula.

    damage = floor((atk / def) * power * 0.3 + 0.2), times 1.15 on a crit,
    never below 1. Damage scales with the attack/defense ratio instead of
    flooring to zero against high defense.
    """
    ratio = effective_attack(attacker_attack, attack_stage) / effective_defense(
        defender_defense, defense_stage, ignore_pct
    )
    raw = ratio * move_power * DAMAGE_SCALE + DAMAGE_CONSTANT
    if is_crit:
        raw *= CRIT_MULTIPLIER
    return max(1, math.floor(raw))


def roll_hit(accuracy: float, rng: RNG = random.random) -> bool:
    """Hit iff the roll is below the (clamped) accuracy."""
    return rng() < clamp(accuracy, MIN_ACCURACY, MAX_ACCURACY)


def roll_crit(is_high_crit: bool, rng: RNG = random.random) -> bool:
    chance = HIGH_CRIT_CHANCE if is_high_crit else BASE_CRIT_CHANCE
    return rng() < chance


def apply_hp_cost(current_hp: int, cost: float | None) -> HpChange:
    """Deduct an hp cost paid up front to use a move."""
    if not cost or cost <= 0:
        return HpChange(hp=current_hp, fainted=False)
    hp = max(0, current_hp - math.floor(cost))
    return HpChange(hp=hp, fainted=hp <= 0)


def apply_recoil(current_hp: int, recoil: float | None) -> HpChange:
    """Deduct recoil taken after a damaging hit."""
    if not recoil or recoil <= 0:
        return HpChange(hp=current_hp, fainted=False)
    hp = max(0, current_hp - math.floor(recoil))
    return HpChange(hp=hp, fainted=hp <= 0)


def apply_heal(current_hp: int, max_hp: int, heal: float | None) -> HpChange:
    if not heal or heal <= 0:
        return HpChange(hp=current_hp, fainted=current_hp <= 0)
    hp = min(current_hp + math.floor(heal), max_hp)
    return HpChange(hp=hp, fainted=hp <= 0)
