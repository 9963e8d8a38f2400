"""Tests for the command-line runner."""

from anime_arena.__main__ import main, parse_args


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """No arguments leaves every option unset."""
        args = parse_args([])
        assert args.player is None
        assert args.opponent is None
        assert args.seed is None
        assert args.list is False

    def test_options(self):
        """Options are parsed with their types."""
        args = parse_args(["--player", "p004", "--opponent", "p005", "--seed", "7"])
        assert args.player == "p004"
        assert args.opponent == "p005"
        assert args.seed == 7


class TestMain:
    """Tests for running the CLI."""

    def test_list(self, capsys):
        """--list prints the roster and exits cleanly."""
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "p001" in out
        assert "Kanao Tsuyuri" in out
        assert len(out.strip().splitlines()) == 14

    def test_seeded_battle(self, capsys):
        """A seeded battle prints its log."""
        assert main(["--player", "p004", "--opponent", "p005", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("=== Goku vs Vegeta ===")
        assert "--- Turn 1 (Goku) ---" in out

    def test_seeded_battle_is_reproducible(self, capsys):
        """The same seed prints the same battle."""
        main(["--seed", "21"])
        first = capsys.readouterr().out
        main(["--seed", "21"])
        second = capsys.readouterr().out
        assert first == second

    def test_unknown_character(self):
        """An unknown character id exits with an error code."""
        assert main(["--player", "nobody"]) == 2
