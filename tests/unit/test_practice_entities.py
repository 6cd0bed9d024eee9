"""Unit tests for practice entities."""

import pytest
from pydantic import ValidationError

from src.domain.entities import (
    Challenge,
    ChallengeType,
    Difficulty,
    Operator,
    PracticeConfig,
    PracticeSessionState,
    SessionMode,
    SessionPhase,
)


class TestEnums:
    """Tests for the practice enums."""

    def test_difficulty_values(self):
        assert Difficulty.EASY.value == "easy"
        assert Difficulty.NORMAL.value == "normal"
        assert Difficulty.HARD.value == "hard"

    def test_difficulty_is_ordered(self):
        assert Difficulty.EASY.rank < Difficulty.NORMAL.rank < Difficulty.HARD.rank

    def test_operator_symbols(self):
        assert [op.value for op in Operator] == ["+", "-", "*", "/"]

    def test_session_mode_values(self):
        assert SessionMode.BY_TIME.value == "time"
        assert SessionMode.BY_QUESTION_COUNT.value == "question_count"

    def test_active_phases(self):
        assert SessionPhase.NEUTRAL.is_active
        assert SessionPhase.FEEDBACK.is_active
        assert not SessionPhase.IDLE.is_active
        assert not SessionPhase.TERMINATED.is_active


class TestPracticeConfig:
    """Tests for PracticeConfig."""

    def test_defaults(self):
        config = PracticeConfig()

        assert config.difficulty == Difficulty.NORMAL
        assert config.operators == frozenset({Operator.ADDITION, Operator.SUBTRACTION})
        assert config.challenge_types == frozenset({ChallengeType.EXPRESSION})

    def test_config_is_frozen(self):
        config = PracticeConfig()

        with pytest.raises(ValidationError):
            config.difficulty = Difficulty.HARD

    def test_operators_from_symbols(self):
        config = PracticeConfig(operators=["*", "/"])

        assert config.operators == frozenset({Operator.MULTIPLICATION, Operator.DIVISION})

    def test_with_and_without_operator_return_copies(self):
        config = PracticeConfig(operators=frozenset({Operator.ADDITION}))

        wider = config.with_operator(Operator.DIVISION)
        narrower = wider.without_operator(Operator.ADDITION)

        assert config.operators == frozenset({Operator.ADDITION})
        assert wider.operators == frozenset({Operator.ADDITION, Operator.DIVISION})
        assert narrower.operators == frozenset({Operator.DIVISION})

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValidationError):
            PracticeConfig(operators=["%"])


class TestChallenge:
    """Tests for Challenge."""

    def test_challenge_is_frozen(self):
        challenge = Challenge(display_form="2 \\times 3", canonical_form="2 * 3")

        with pytest.raises(ValidationError):
            challenge.canonical_form = "7"

    def test_challenges_compare_by_value(self):
        assert Challenge(display_form="1 + 1", canonical_form="1 + 1") == Challenge(
            display_form="1 + 1", canonical_form="1 + 1"
        )


class TestPracticeSessionState:
    """Tests for PracticeSessionState."""

    def test_defaults(self):
        state = PracticeSessionState()

        assert state.current_challenge is None
        assert state.current_answer == ""
        assert state.streak == 0
        assert state.correct_count == 0
        assert state.showing_feedback is False
        assert state.mode == SessionMode.BY_TIME
        assert state.target_question_count == 10
        assert state.total_time_seconds == 10
        assert state.time_left_seconds == 0
        assert state.phase == SessionPhase.IDLE

    def test_counters_cannot_go_negative(self):
        state = PracticeSessionState()

        with pytest.raises(ValidationError):
            state.streak = -1

    def test_target_question_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            PracticeSessionState(target_question_count=0)
