# Area: Game Tests
"""Tests for GameSide and the variant scoring strategies."""

from worduel._dict.wordmatch import MatchLetter
from worduel._game.enums import GameVariant
from worduel._game.scoring import TimedScoring, TurnScoring, strategy_for
from worduel._game.side import GameSide


def make_side(secret="slide", guesses=()):
    side = GameSide("alice", baseword=secret)
    for guess in guesses:
        side.push_guess(guess)
    return side


class TestGameSide:
    """Test guess recording and the keyboard."""

    def test_new_side_is_not_victorious(self):
        side = make_side()
        assert side.guess_count == 0
        assert side.last_guess is None
        assert not side.victorious()

    def test_push_guess_records_feedback(self):
        side = make_side()
        assert side.push_guess("tower") is False
        assert side.guess_count == 1
        assert side.last_guess.word == "tower"
        assert side.last_guess.wmatch[3] == MatchLetter.CLOSE

    def test_winning_guess(self):
        side = make_side(guesses=["tower"])
        assert side.push_guess("slide") is True
        assert side.victorious()
        assert side.last_guess.exact

    def test_keyboard_never_downgrades(self):
        """Test that a letter keeps the best status seen."""
        side = make_side(guesses=["lease"])
        assert side.keyboard["e"] == MatchLetter.EXACT
        side.push_guess("tower")
        assert side.keyboard["e"] == MatchLetter.EXACT
        assert side.keyboard["t"] == MatchLetter.NULL

    def test_keyboard_repeated_letter_keeps_best(self):
        """Test that one guess with a repeated letter stores its best status."""
        side = make_side(guesses=["lease"])
        # 'e' is NULL at index 1 and EXACT at index 4
        assert side.keyboard["e"] == MatchLetter.EXACT

    def test_victory_only_counts_last_guess(self):
        side = make_side(guesses=["slide", "tower"])
        assert not side.victorious()


class TestSideScores:
    """Test the raw score formulas."""

    def test_timed_score(self):
        side = make_side(guesses=["tower", "lease", "slide"])
        assert side.calculate_timed_score(20, 6) == 32

    def test_timed_score_caps_guess_count(self):
        side = make_side(guesses=["tower"] * 8)
        assert side.calculate_timed_score(0, 6) == 3

    def test_turn_score(self):
        side = make_side(guesses=["tower", "lease", "slide"])
        assert side.calculate_turn_score(6, 3, 5) == 27

    def test_turn_score_without_advantage(self):
        side = make_side(guesses=["slide"])
        # base = 6 - 1 + 1
        assert side.calculate_turn_score(6, 0, 5) == 6

    def test_turn_score_scales_with_length(self):
        side = make_side(secret="sliders", guesses=["sliders"])
        assert side.calculate_turn_score(8, 0, 7) == 11


class TestScoringStrategies:
    """Test the per-variant strategies."""

    def test_strategy_for_variant(self):
        assert isinstance(strategy_for(GameVariant.TIMED), TimedScoring)
        assert isinstance(strategy_for(GameVariant.TURN_BASED), TurnScoring)

    def test_timed_uses_seconds_advantage(self):
        side = make_side(guesses=["slide"])
        opponent = make_side(guesses=["tower", "slide"])
        assert TimedScoring().score(side, opponent, 7, 6, 5) == 7 + 6 * 3

    def test_turn_uses_guess_difference(self):
        side = make_side(guesses=["tower", "lease", "slide"])
        opponent = make_side(guesses=["tower"] * 6)
        assert TurnScoring().score(side, opponent, 99, 6, 5) == 27

    def test_turn_difference_never_negative(self):
        """Test that an opponent with fewer guesses gives no bonus."""
        side = make_side(guesses=["tower", "lease", "slide"])
        opponent = make_side(guesses=["slide"])
        assert TurnScoring().score(side, opponent, 0, 6, 5) == 4
