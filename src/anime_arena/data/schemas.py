"""Catalog schemas - validate character and move data before it reaches the engine."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..engine.types import Character, Move, MoveEffect

MOVES_PER_CHARACTER = 4


class MoveEffectSchema(BaseModel):
    """One entry of a composite ``effects`` list."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Effect type, e.g. 'attack_up' or 'paralyze'")
    value: float | None = Field(default=None, description="Stage delta, heal amount or defense-ignore fraction")
    chance: float | None = Field(default=None, ge=0, le=1, description="Proc chance for statuses")
    turns: int | None = Field(default=None, ge=0, description="Duration for invulnerability")

    def to_domain(self) -> MoveEffect:
        return MoveEffect(type=self.type, value=self.value, chance=self.chance, turns=self.turns)


class MoveSchema(BaseModel):
    """A move. Accepts both snake_case and the catalog's camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    power: float = Field(ge=0, description="0 means the move deals no damage")
    accuracy: float = Field(ge=0, le=1, description="Hit probability before stages")

    # Legacy single-effect form
    effect: str | None = None
    value: float | None = None
    chance: float | None = Field(default=None, ge=0, le=1)
    turns: int | None = Field(default=None, ge=0)

    # Composite form
    effects: list[MoveEffectSchema] | None = None

    recoil_damage: float | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("recoil_damage", "recoilDamage")
    )
    hp_cost: float | None = Field(default=None, ge=0, validation_alias=AliasChoices("hp_cost", "hpCost"))
    hits: int | None = Field(default=None, ge=1)
    high_crit_chance: bool = Field(
        default=False, validation_alias=AliasChoices("high_crit_chance", "highCritChance")
    )
    charge_turns: int | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("charge_turns", "chargeTurns")
    )

    def to_domain(self) -> Move:
        return Move(
            id=self.id,
            name=self.name,
            power=self.power,
            accuracy=self.accuracy,
            effect=self.effect,
            value=self.value,
            chance=self.chance,
            turns=self.turns,
            effects=tuple(e.to_domain() for e in self.effects) if self.effects is not None else None,
            recoil_damage=self.recoil_damage,
            hp_cost=self.hp_cost,
            hits=self.hits,
            high_crit_chance=self.high_crit_chance,
            charge_turns=self.charge_turns,
        )


class CharacterSchema(BaseModel):
    """A catalog character: base stats and exactly four moves."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    sprite: str = Field(default="", validation_alias=AliasChoices("sprite", "spriteRef", "sprite_ref"))
    hp: int = Field(gt=0)
    attack: int = Field(gt=0)
    defense: int = Field(gt=0)
    moves: list[MoveSchema]

    @field_validator("moves")
    @classmethod
    def _four_moves(cls, moves: list[MoveSchema]) -> list[MoveSchema]:
        if len(moves) != MOVES_PER_CHARACTER:
            raise ValueError(f"a character needs exactly {MOVES_PER_CHARACTER} moves, got {len(moves)}")
        ids = [m.id for m in moves]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate move ids: {ids}")
        return moves

    def to_domain(self) -> Character:
        return Character(
            id=self.id,
            name=self.name,
            sprite=self.sprite,
            hp=self.hp,
            attack=self.attack,
            defense=self.defense,
            moves=tuple(m.to_domain() for m in self.moves),
        )
