"""Tests for the charge tracker."""

from conftest import make_character, make_move, make_state

from anime_arena.engine.charge import ChargeTracker
from anime_arena.engine.events import EventType
from anime_arena.engine.types import ChargeState, Side


class TestChargeTracker:
    """Tests for ChargeTracker."""

    def setup_method(self):
        """Set up test fixtures."""
        self.tracker = ChargeTracker()
        self.beam = make_move("beam", "Beam", power=120, charge_turns=2)
        self.state = make_state(
            make_character("p", "Hero", moves=[self.beam]),
            make_character("o", "Rival"),
        )

    def test_starts_for_charge_move(self):
        """A move with charge_turns starts charging."""
        result = self.tracker.maybe_start_charge(self.state, Side.PLAYER, self.beam)
        assert result.started
        assert result.state.player_charge == ChargeState(move_id="beam", turns_left=2)
        assert result.state.opponent_charge is None
        assert result.events[0].event_type == EventType.CHARGE_STARTED
        assert result.events[0].move_name == "Beam"
        assert result.events[0].turns == 2

    def test_no_start_for_plain_move(self):
        """Moves without charge_turns never charge."""
        result = self.tracker.maybe_start_charge(self.state, Side.PLAYER, make_move())
        assert not result.started
        assert result.state is self.state
        assert result.events == []

    def test_no_start_while_pending(self):
        """A side holds at most one charge."""
        state = self.tracker.set_charge(self.state, Side.PLAYER, ChargeState("other", 1))
        result = self.tracker.maybe_start_charge(state, Side.PLAYER, self.beam)
        assert not result.started
        assert result.state.player_charge.move_id == "other"

    def test_tick_counts_down(self):
        """Ticking removes one turn and reports readiness at zero."""
        state = self.tracker.set_charge(self.state, Side.OPPONENT, ChargeState("beam", 2))
        first = self.tracker.tick_charge(state, Side.OPPONENT)
        assert first.state.opponent_charge.turns_left == 1
        assert not first.ready
        second = self.tracker.tick_charge(first.state, Side.OPPONENT)
        assert second.state.opponent_charge.turns_left == 0
        assert second.ready

    def test_tick_without_charge(self):
        """Ticking an empty slot changes nothing."""
        result = self.tracker.tick_charge(self.state, Side.PLAYER)
        assert result.state is self.state
        assert not result.ready

    def test_tick_never_goes_negative(self):
        """turns_left stops at zero."""
        state = self.tracker.set_charge(self.state, Side.PLAYER, ChargeState("beam", 0))
        assert self.tracker.tick_charge(state, Side.PLAYER).state.player_charge.turns_left == 0

    def test_release_when_ready(self):
        """A ready charge clears and hands back the stored move."""
        state = self.tracker.set_charge(self.state, Side.PLAYER, ChargeState("beam", 0))
        result = self.tracker.maybe_release_charge(state, Side.PLAYER, state.player.get_move)
        assert result.move == self.beam
        assert result.state.player_charge is None
        assert result.events[0].event_type == EventType.CHARGE_RELEASED
        assert result.events[0].move_id == "beam"

    def test_no_release_while_charging(self):
        """A charge with turns left is kept."""
        state = self.tracker.set_charge(self.state, Side.PLAYER, ChargeState("beam", 1))
        result = self.tracker.maybe_release_charge(state, Side.PLAYER, state.player.get_move)
        assert result.move is None
        assert result.state.player_charge == ChargeState("beam", 1)

    def test_unresolvable_move_clears_silently(self):
        """A stored id that no longer resolves clears the slot without an event."""
        state = self.tracker.set_charge(self.state, Side.PLAYER, ChargeState("gone", 0))
        result = self.tracker.maybe_release_charge(state, Side.PLAYER, state.player.get_move)
        assert result.move is None
        assert result.state.player_charge is None
        assert result.events == []

    def test_sides_are_independent(self):
        """Charging one side leaves the other slot alone."""
        started = self.tracker.maybe_start_charge(self.state, Side.PLAYER, self.beam)
        assert self.tracker.get_charge(started.state, Side.OPPONENT) is None
