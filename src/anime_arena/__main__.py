"""Entry point for playing a headless battle from the command line."""

import argparse
import logging
import sys
import time

from anime_arena.config import get_settings
from anime_arena.services.battles import BattleSession, GameStatus


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="anime_arena", description="Play a battle with random moves on both sides.")
    parser.add_argument("--player", help="Player character id (default from settings)")
    parser.add_argument("--opponent", help="Opponent character id (default from settings)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible battle")
    parser.add_argument("--list", action="store_true", help="List the roster and exit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one autoplayed battle and print its log."""
    args = parse_args(argv)
    settings = get_settings()
    if args.seed is not None:
        settings = settings.model_copy(update={"rng_seed": args.seed})

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = BattleSession(settings=settings)

    if args.list:
        for character in session.catalog.values():
            moves = ", ".join(m.name for m in character.moves)
            print(f"{character.id}  {character.name:<18} HP {character.hp:>3}  ATK {character.attack:>3}  "
                  f"DEF {character.defense:>3}  [{moves}]")
        return 0

    for character_id, select in ((args.player, session.select_player), (args.opponent, session.select_opponent)):
        if character_id is None:
            continue
        result = select(character_id)
        if not result.success:
            logging.error(result.message)
            return 2

    result = session.start_battle()
    if not result.success:
        logging.error(result.message)
        return 2

    turns = 0
    while session.status == GameStatus.PLAYER_TURN and turns < settings.max_turns:
        moves = session.state.player.moves
        move = moves[min(int(session.rng() * len(moves)), len(moves) - 1)]
        session.handle_move(move.id)
        turns += 1
        if settings.turn_delay_seconds > 0:
            time.sleep(settings.turn_delay_seconds)

    if session.status != GameStatus.GAME_OVER:
        logging.warning("Battle stopped after %d exchanges without a winner", turns)

    print(session.battle_log.format_readable())
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
