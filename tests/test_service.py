# Area: Service Tests
"""Tests for WorduelService — invites, in-game operations and expiry."""

import random
import threading
import time
from unittest.mock import patch

import pytest

from worduel import (
    AlreadyInGameError,
    BadWordLengthError,
    Continue,
    Dictionary,
    ForfeitBadUserError,
    GameDeletedError,
    GameProgress,
    GameStartedError,
    GameVariant,
    NoGameError,
    NoInviteError,
    Remove,
    SelfChallengeError,
    WordNotFoundError,
    WorduelService,
)
from worduel.config import EngineSettings


SERVICE_TIME = "worduel.service.time"
GAME_TIME = "worduel._game.multiplayer.time"
TIMED = GameVariant.TIMED
TURN = GameVariant.TURN_BASED
WORDS = ["north", "slide", "tower", "lease", "plumb", "crane", "ghost",
         "dwarf", "slider", "word"]
MISSES = ["tower", "lease", "plumb", "crane", "ghost", "dwarf"]


@pytest.fixture
def service():
    return WorduelService(dictionary=Dictionary(WORDS, rng=random.Random(1)))


def start_duel(service, variant=TIMED, owner="alice", opponent="bob"):
    """Owner must guess 'slide', opponent must guess 'north'."""
    service.challenge(owner, opponent, variant, "north")
    return service.accept_invite(opponent, owner, variant, "slide")


def binding(service, user, variant=TIMED, opponent=None):
    data = service.players.get(user)
    return data.slot(variant).lookup(opponent) if data is not None else None


class TestChallenge:
    """Test issuing challenges."""

    def test_challenge_creates_waiting_game(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "north")
        assert game_id == 1
        with service.games.read():
            game = service.games.get(game_id)
        assert game.progress == GameProgress.waiting()
        assert game.user_ids == ("alice", "bob")
        assert binding(service, "alice") == game_id
        assert binding(service, "bob") is None
        assert service.invites("bob", TIMED)["alice"].game_id == game_id

    def test_invite_ttl_by_variant(self, service):
        with patch(SERVICE_TIME) as mock_time:
            mock_time.monotonic.return_value = 1000.0
            service.challenge("alice", "bob", TIMED, "north")
            service.challenge("alice", "bob", TURN, "north")
        assert service.invites("bob", TIMED)["alice"].expiry == 1300.0
        assert service.invites("bob", TURN)["alice"].expiry == 1900.0

    def test_game_ids_increase(self, service):
        first = service.challenge("alice", "bob", TIMED, "north")
        second = service.challenge("carol", "dave", TIMED, "north")
        assert second > first

    def test_self_challenge(self, service):
        with pytest.raises(SelfChallengeError):
            service.challenge("alice", "alice", TIMED, "north")

    def test_unknown_word(self, service):
        with pytest.raises(WordNotFoundError):
            service.challenge("alice", "bob", TIMED, "zzzzz")
        assert len(service.games) == 0

    def test_length_request_draws_secret(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "6")
        with service.games.read():
            assert service.games.get(game_id).get_baseword(1) == "slider"

    def test_length_out_of_bounds(self, service):
        with pytest.raises(BadWordLengthError):
            service.challenge("alice", "bob", TIMED, "3")

    def test_without_dictionary_only_length_is_checked(self):
        service = WorduelService()
        game_id = service.challenge("alice", "bob", TIMED, "QWXZP")
        with service.games.read():
            assert service.games.get(game_id).get_baseword(1) == "qwxzp"
        with pytest.raises(BadWordLengthError):
            service.challenge("carol", "dave", TIMED, "abcdefghij")

    def test_one_timed_game_per_owner(self, service):
        service.challenge("alice", "bob", TIMED, "north")
        with pytest.raises(AlreadyInGameError) as exc:
            service.challenge("alice", "carol", TIMED, "north")
        assert exc.value.target is False

    def test_target_already_in_timed_game(self, service):
        start_duel(service)
        with pytest.raises(AlreadyInGameError) as exc:
            service.challenge("carol", "bob", TIMED, "north")
        assert exc.value.target is True

    def test_turn_based_one_game_per_opponent(self, service):
        """Test that turn-based slots are keyed by opponent."""
        service.challenge("alice", "bob", TURN, "north")
        service.challenge("alice", "carol", TURN, "north")
        with pytest.raises(AlreadyInGameError):
            service.challenge("alice", "bob", TURN, "north")
        assert binding(service, "alice", TURN, "bob") != binding(service, "alice", TURN, "carol")

    def test_turn_based_target_bound_against_owner(self, service):
        start_duel(service, TURN)
        with pytest.raises(AlreadyInGameError) as exc:
            service.challenge("bob", "alice", TURN, "north")
        assert exc.value.target is False
        # A third player may still challenge either of them
        service.challenge("carol", "bob", TURN, "north")

    def test_variants_are_independent(self, service):
        start_duel(service, TIMED)
        service.challenge("alice", "bob", TURN, "north")


class TestAcceptInvite:
    """Test accepting invites."""

    def test_accept_starts_game(self, service):
        game_id = start_duel(service)
        with service.games.read():
            game = service.games.get(game_id)
        assert game.progress.state.value == "started"
        assert game.get_baseword(0) == "slide"
        assert binding(service, "alice") == game_id
        assert binding(service, "bob") == game_id
        assert service.invites("bob", TIMED) == {}

    def test_no_invite(self, service):
        with pytest.raises(NoInviteError):
            service.accept_invite("bob", "alice", TIMED, "slide")

    def test_invite_for_other_variant(self, service):
        service.challenge("alice", "bob", TIMED, "north")
        with pytest.raises(NoInviteError):
            service.accept_invite("bob", "alice", TURN, "slide")

    def test_wrong_length_keeps_invite(self, service):
        """Test that the acceptor can retry after a length mismatch."""
        service.challenge("alice", "bob", TIMED, "north")
        with pytest.raises(BadWordLengthError):
            service.accept_invite("bob", "alice", TIMED, "slider")
        assert "alice" in service.invites("bob", TIMED)
        assert binding(service, "bob") is None
        service.accept_invite("bob", "alice", TIMED, "slide")

    def test_expired_invite_is_purged(self, service):
        with patch(SERVICE_TIME) as mock_time:
            mock_time.monotonic.return_value = 1000.0
            service.challenge("alice", "bob", TIMED, "north")
            mock_time.monotonic.return_value = 1300.0
            with pytest.raises(NoInviteError):
                service.accept_invite("bob", "alice", TIMED, "slide")
        assert len(service.games) == 0
        assert binding(service, "alice") is None
        assert service.invites("bob", TIMED) == {}

    def test_acceptor_already_in_game(self, service):
        service.challenge("carol", "bob", TIMED, "north")
        start_duel(service)
        with pytest.raises(AlreadyInGameError) as exc:
            service.accept_invite("bob", "carol", TIMED, "slide")
        assert exc.value.target is False

    def test_deleted_game_drops_invite(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "north")
        with service.games.write():
            service.games.remove(game_id)
        with pytest.raises(GameDeletedError) as exc:
            service.accept_invite("bob", "alice", TIMED, "slide")
        assert exc.value.game_id == game_id
        assert service.invites("bob", TIMED) == {}

    def test_started_game_drops_invite(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "north")
        with service.games.write():
            service.games.get(game_id).respond("slide", "bob")
        with pytest.raises(GameStartedError) as exc:
            service.accept_invite("bob", "alice", TIMED, "slide")
        assert exc.value.expected_started is False
        assert service.invites("bob", TIMED) == {}

    def test_rechallenge_after_stale_binding_replaces_invite(self, service):
        """Test that a challenge after a self-healed binding overwrites the old invite."""
        old_id = service.challenge("alice", "bob", TIMED, "north")
        with service.games.write():
            service.games.remove(old_id)
        with pytest.raises(GameDeletedError):
            service.status("alice", TIMED)

        new_id = service.challenge("alice", "bob", TIMED, "north")
        invites = service.invites("bob", TIMED)
        assert list(invites) == ["alice"]
        assert invites["alice"].game_id == new_id
        assert service.accept_invite("bob", "alice", TIMED, "slide") == new_id

    def test_overwritten_invite_deletes_previous_game(self, service):
        """Test that the game behind a replaced invite is removed."""
        old_id = service.challenge("alice", "bob", TIMED, "north")
        with service.players.write():
            service.players.get("alice").slot(TIMED).unbind()

        new_id = service.challenge("alice", "bob", TIMED, "north")
        assert old_id not in service.games
        assert new_id in service.games
        assert service.invites("bob", TIMED)["alice"].game_id == new_id
        assert len(service.games) == 1

    def test_non_decimal_length_request(self, service):
        with pytest.raises(BadWordLengthError):
            service.challenge("alice", "bob", TIMED, "5²")
        assert len(service.games) == 0


class TestRejectInvite:
    """Test rejecting invites."""

    def test_reject_deletes_game(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "north")
        game = service.reject_invite("bob", "alice", TIMED)
        assert game.user_ids == ("alice", "bob")
        assert game_id not in service.games
        assert binding(service, "alice") is None
        assert service.invites("bob", TIMED) == {}
        # Alice is free to challenge again
        service.challenge("alice", "carol", TIMED, "north")

    def test_reject_without_invite(self, service):
        with pytest.raises(NoInviteError):
            service.reject_invite("bob", "alice", TIMED)

    def test_reject_vanished_game_returns_none(self, service):
        game_id = service.challenge("alice", "bob", TIMED, "north")
        with service.games.write():
            service.games.remove(game_id)
        assert service.reject_invite("bob", "alice", TIMED) is None


class TestGuess:
    """Test guessing through the service."""

    def test_full_duel_scenario(self, service):
        """Test the north/slide duel end to end, including score posting."""
        with patch(GAME_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            game_id = start_duel(service)
            mock_time.monotonic.return_value = 105.0
            service.guess("alice", TIMED, "tower")
            service.guess("alice", TIMED, "lease")
            mock_time.monotonic.return_value = 110.0
            report = service.guess("alice", TIMED, "slide")
            assert report.accepted
            assert report.progress == GameProgress.ending(0)
            mock_time.monotonic.return_value = 120.0
            service.guess("bob", TIMED, "tower")
            mock_time.monotonic.return_value = 130.0
            report = service.guess("bob", TIMED, "north")

        assert report.progress == GameProgress.over(0)
        assert report.state_line == "Game over (winner: alice, score: 32:0)"
        assert "[N][O][R][T][H]" in report.views
        assert game_id not in service.games
        assert binding(service, "alice") is None
        assert binding(service, "bob") is None
        assert service.scores.get("alice") == 32
        assert service.scores.get("bob") == 0

    def test_guess_before_start(self, service):
        service.challenge("alice", "bob", TIMED, "north")
        with pytest.raises(GameStartedError) as exc:
            service.guess("alice", TIMED, "slide")
        assert exc.value.expected_started is True

    def test_guess_without_game(self, service):
        with pytest.raises(NoGameError):
            service.guess("alice", TIMED, "slide")

    def test_unknown_guess_word(self, service):
        start_duel(service)
        with pytest.raises(WordNotFoundError):
            service.guess("alice", TIMED, "zzzzz")

    def test_wrong_length_guess_not_accepted(self, service):
        start_duel(service)
        report = service.guess("alice", TIMED, "slider")
        assert report.accepted is False
        assert service.status("alice", TIMED)["sides"][0]["guesses"] == []

    def test_repeat_guess_after_finishing_not_accepted(self, service):
        start_duel(service)
        service.guess("alice", TIMED, "slide")
        report = service.guess("alice", TIMED, "tower")
        assert report.accepted is False

    def test_turn_based_guess_needs_opponent(self, service):
        start_duel(service, TURN)
        with pytest.raises(NoGameError):
            service.guess("alice", TURN, "slide")
        report = service.guess("alice", TURN, "slide", opponent="bob")
        assert report.progress == GameProgress.ending(0)

    def test_turn_based_scores_posted(self, service):
        start_duel(service, TURN)
        for word in ["tower", "lease", "slide"]:
            service.guess("alice", TURN, word, opponent="bob")
        for word in MISSES:
            service.guess("bob", TURN, word, opponent="alice")
        assert service.scores.list_top(2) == [("alice", 27), ("bob", 0)]

    def test_leaderboard_accumulates_across_games(self, service):
        for _ in range(2):
            start_duel(service)
            service.guess("alice", TIMED, "slide")
            for word in MISSES:
                service.guess("bob", TIMED, word)
        assert service.scores.get("alice") == 36


class TestForfeit:
    """Test forfeiting."""

    def test_forfeit_must_name_opponent(self, service):
        start_duel(service)
        with pytest.raises(ForfeitBadUserError):
            service.forfeit("alice", TIMED, "carol")
        assert binding(service, "alice") is not None

    def test_forfeit_removes_without_scores(self, service):
        game_id = start_duel(service)
        service.guess("alice", TIMED, "slide")
        report = service.forfeit("bob", TIMED, "alice")
        assert report.was_waiting is False
        assert game_id not in service.games
        assert binding(service, "alice") is None
        assert binding(service, "bob") is None
        assert service.scores.get("alice") is None

    def test_forfeit_waiting_clears_invite(self, service):
        service.challenge("alice", "bob", TIMED, "north")
        report = service.forfeit("alice", TIMED, "bob")
        assert report.was_waiting is True
        assert report.state_line == "Waiting"
        assert service.invites("bob", TIMED) == {}
        with pytest.raises(NoInviteError):
            service.accept_invite("bob", "alice", TIMED, "slide")

    def test_turn_based_forfeit_selects_by_opponent(self, service):
        start_duel(service, TURN, "alice", "bob")
        start_duel(service, TURN, "alice", "carol")
        service.forfeit("alice", TURN, "carol")
        assert binding(service, "alice", TURN, "bob") is not None
        assert binding(service, "alice", TURN, "carol") is None


class TestActOnGame:
    """Test the generic operation runner."""

    def test_keyboard_and_status(self, service):
        start_duel(service)
        service.guess("alice", TIMED, "tower")
        keyboard = service.keyboard("alice", TIMED)
        assert keyboard.split("\n")[0] == " q  W :E: R  T  y  u  i  O  p "
        status = service.status("bob", TIMED)
        assert status["progress"] == "started"
        assert status["sides"][0]["guesses"] == ["tower"]

    def test_bare_value_keeps_game(self, service):
        game_id = start_duel(service)
        result = service.act_on_game("alice", TIMED, lambda data, gid, game: gid)
        assert result == game_id
        assert game_id in service.games

    def test_continue_value_returned(self, service):
        start_duel(service)
        result = service.act_on_game("bob", TIMED, lambda data, gid, game: Continue("ok"))
        assert result == "ok"

    def test_remove_clears_bindings(self, service):
        game_id = start_duel(service)
        result = service.act_on_game("alice", TIMED, lambda data, gid, game: Remove("gone"))
        assert result == "gone"
        assert game_id not in service.games
        assert binding(service, "bob") is None

    def test_operation_error_leaves_game(self, service):
        game_id = start_duel(service)

        def failing(data, gid, game):
            raise ForfeitBadUserError()

        with pytest.raises(ForfeitBadUserError):
            service.act_on_game("alice", TIMED, failing)
        assert game_id in service.games

    def test_stale_binding_self_heals(self, service):
        """Test that a binding to a deleted game is cleared on first use."""
        game_id = start_duel(service)
        with service.games.write():
            service.games.remove(game_id)
        with pytest.raises(GameDeletedError):
            service.guess("alice", TIMED, "slide")
        with pytest.raises(NoGameError):
            service.guess("alice", TIMED, "slide")


class TestExpiry:
    """Test the sweep passes."""

    def test_clean_invites(self, service):
        timed_id = service.challenge("alice", "bob", TIMED, "north")
        turn_id = service.challenge("alice", "bob", TURN, "north")
        removed = service.clean_invites(now=time.monotonic() + 301)
        assert removed == [timed_id]
        assert binding(service, "alice") is None
        assert turn_id in service.games
        assert service.clean_invites(now=time.monotonic() + 901) == [turn_id]
        assert len(service.games) == 0
        assert "alice" not in service.players

    def test_clean_invites_keeps_live_invites(self, service):
        service.challenge("alice", "bob", TIMED, "north")
        assert service.clean_invites(now=time.monotonic() + 10) == []
        assert "alice" in service.invites("bob", TIMED)

    def test_clean_games_expires_started_timed(self, service):
        game_id = start_duel(service)
        with service.games.read():
            start = service.games.get(game_id).start
        assert service.clean_games(now=start + 599) == []
        assert service.clean_games(now=start + 600) == [game_id]
        assert binding(service, "alice") is None
        assert binding(service, "bob") is None
        assert service.scores.get("alice") is None

    def test_clean_games_ignores_turn_based_and_waiting(self, service):
        start_duel(service, TURN)
        service.challenge("carol", "dave", TIMED, "north")
        assert service.clean_games(now=time.monotonic() + 10_000) == []
        assert len(service.games) == 2

    def test_sweep_report(self, service):
        start_duel(service)
        waiting_id = service.challenge("carol", "dave", TIMED, "north")
        report = service.sweep(now=time.monotonic() + 700)
        assert report.expired_invites == [waiting_id]
        assert len(report.expired_games) == 1
        assert report.total == 2
        assert len(service.games) == 0

    def test_custom_expiry_settings(self):
        settings = EngineSettings(timed_invite_expiry=5, timed_game_expiry=10)
        service = WorduelService(settings=settings)
        service.challenge("alice", "bob", TIMED, "north")
        assert len(service.clean_invites(now=time.monotonic() + 6)) == 1


class TestConcurrency:
    """Test many duels running in parallel threads."""

    def test_parallel_duels(self, service):
        errors = []

        def play(n):
            owner, opponent = f"p{n}a", f"p{n}b"
            try:
                start_duel(service, TIMED, owner, opponent)
                service.guess(owner, TIMED, "slide")
                for word in MISSES:
                    service.guess(opponent, TIMED, word)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=play, args=(n,)) for n in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(service.games) == 0
        top = service.scores.list_top(100)
        assert len(top) == 32
        assert sum(score for _, score in top) == 16 * 18
