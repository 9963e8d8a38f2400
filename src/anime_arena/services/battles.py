"""Battle service - runs a player-vs-opponent session on top of the engine."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from ..config import Settings, get_settings
from ..data.catalog import get_catalog, load_catalog_file
from ..engine.events import BattleEvent
from ..engine.logging import BattleLog
from ..engine.turn import TurnResolver, initialize_battle_state
from ..engine.types import RNG, BattleState, Character, Move, Side

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Where the session is in its lifecycle."""

    SELECTING = "selecting"  # Picking characters
    PLAYER_TURN = "player_turn"  # Waiting for the player's move
    GAME_OVER = "game_over"  # A combatant fainted


@dataclass
class BattleResult:
    """Result of a session operation."""

    success: bool
    message: str
    events: list[BattleEvent] = field(default_factory=list)
    log_lines: list[str] = field(default_factory=list)
    winner: Side | None = None


class BattleSession:
    """Holds the current battle and alternates player and opponent turns.

    The opponent picks uniformly at random from its moves. All randomness,
    including the engine's rolls, comes from one injected RNG so a seeded
    session replays exactly.
    """

    def __init__(
        self,
        catalog: Mapping[str, Character] | None = None,
        rng: RNG | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if catalog is not None:
            self.catalog = dict(catalog)
        elif self.settings.catalog_path:
            self.catalog = load_catalog_file(self.settings.catalog_path)
        else:
            self.catalog = get_catalog()
        self.rng = rng or self.settings.make_rng()
        self.resolver = TurnResolver()
        self._reset()

    def _reset(self) -> None:
        self.status = GameStatus.SELECTING
        self.player_choice_id = self.settings.default_player_id
        self.opponent_choice_id = self.settings.default_opponent_id
        self.state: BattleState | None = None
        self.history: list[BattleState] = []
        self.battle_log: BattleLog | None = None
        self.log_lines: list[str] = []

    @property
    def winner(self) -> Side | None:
        """The side still standing once a combatant has fainted."""
        if self.state is None or not self.state.is_over:
            return None
        if self.state.player.is_alive():
            return Side.PLAYER
        if self.state.opponent.is_alive():
            return Side.OPPONENT
        return None

    def select_player(self, character_id: str) -> BattleResult:
        """Choose the player's character."""
        return self._select(character_id, Side.PLAYER)

    def select_opponent(self, character_id: str) -> BattleResult:
        """Choose the opponent's character."""
        return self._select(character_id, Side.OPPONENT)

    def _select(self, character_id: str, side: Side) -> BattleResult:
        if self.status != GameStatus.SELECTING:
            return BattleResult(success=False, message="Characters can only be chosen before the battle")
        if character_id not in self.catalog:
            return BattleResult(success=False, message=f"Unknown character: {character_id}")

        if side is Side.PLAYER:
            self.player_choice_id = character_id
        else:
            self.opponent_choice_id = character_id
        return BattleResult(success=True, message=f"{self.catalog[character_id].name} selected")

    def start_battle(self) -> BattleResult:
        """Build the opening state from the current choices."""
        if self.status != GameStatus.SELECTING:
            return BattleResult(success=False, message="A battle is already running")

        player = self.catalog.get(self.player_choice_id)
        opponent = self.catalog.get(self.opponent_choice_id)
        if player is None or opponent is None:
            return BattleResult(success=False, message="Both characters must be chosen from the catalog")

        self.state = initialize_battle_state(player, opponent)
        self.history = [self.state]
        self.battle_log = BattleLog(player_name=player.name, opponent_name=opponent.name)
        self.log_lines = ["The battle begins!"]
        self.status = GameStatus.PLAYER_TURN

        logger.info("Battle started: %s vs %s", player.name, opponent.name)
        return BattleResult(success=True, message="The battle begins!", log_lines=list(self.log_lines))

    def choose_opponent_move(self) -> Move | None:
        """Pick one of the opponent's moves uniformly at random."""
        if self.state is None or not self.state.opponent.moves:
            return None
        moves = self.state.opponent.moves
        index = min(int(self.rng() * len(moves)), len(moves) - 1)
        return moves[index]

    def handle_move(self, move_id: str) -> BattleResult:
        """Resolve the player's move and, if the battle goes on, the opponent's reply.

        Args:
            move_id: ID of the player's chosen move

        Returns:
            BattleResult with both turns' events and the log lines for the exchange
        """
        if self.state is None or self.status != GameStatus.PLAYER_TURN:
            return BattleResult(success=False, message="It is not the player's turn")

        events = self._resolve(Side.PLAYER, move_id)
        self.log_lines = list(self.battle_log.entries[-1].messages)

        if not self.state.is_over:
            opponent_move = self.choose_opponent_move()
            events.extend(self._resolve(Side.OPPONENT, opponent_move.id if opponent_move else None))
            self.log_lines.extend(self.battle_log.entries[-1].messages)

        if self.state.is_over:
            self.status = GameStatus.GAME_OVER
            logger.info("Battle over, winner: %s", self.winner.value if self.winner else "none")
        else:
            self.status = GameStatus.PLAYER_TURN

        return BattleResult(
            success=True,
            message="Turn resolved",
            events=events,
            log_lines=list(self.log_lines),
            winner=self.winner,
        )

    def _resolve(self, side: Side, move_id: str | None) -> list[BattleEvent]:
        result = self.resolver.take_turn(self.state, side, move_id, self.rng)
        self.state = result.state
        self.history.append(result.state)
        self.battle_log.record(side, result.events, result.state)
        logger.debug("%s turn resolved with %d events (move=%s)", side.value, len(result.events), move_id)
        return list(result.events)

    def restart(self) -> BattleResult:
        """Abandon the current battle and go back to character selection."""
        self._reset()
        return BattleResult(success=True, message="Back to character selection")
