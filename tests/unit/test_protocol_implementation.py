"""Test that infrastructure implementations conform to the domain protocols."""

import random

from src.domain.entities import Challenge, Difficulty, Operator
from src.domain.interfaces import AnswerVerifier, ChallengeProvider, Scheduler, TimerHandle
from src.infrastructure.asyncio_scheduler import AsyncioScheduler
from src.infrastructure.expression_challenge_provider import ExpressionChallengeProvider
from src.infrastructure.manual_scheduler import ManualScheduler
from src.infrastructure.sympy_answer_verifier import SympyAnswerVerifier


def test_expression_provider_implements_protocol():
    """Test that ExpressionChallengeProvider implements ChallengeProvider protocol."""
    provider = ExpressionChallengeProvider(random.Random(0))

    assert isinstance(provider, ChallengeProvider)

    result = provider.generate(Difficulty.EASY, frozenset({Operator.ADDITION}))
    assert isinstance(result, Challenge)


def test_sympy_verifier_implements_protocol():
    """Test that SympyAnswerVerifier implements AnswerVerifier protocol."""
    verifier = SympyAnswerVerifier()

    assert isinstance(verifier, AnswerVerifier)
    assert verifier.equals("4", "2 + 2") is True


def test_schedulers_implement_protocol():
    """Test that both schedulers can be used interchangeably through the protocol."""
    assert isinstance(ManualScheduler(), Scheduler)
    assert isinstance(AsyncioScheduler(), Scheduler)


def test_manual_timer_implements_handle_protocol():
    scheduler = ManualScheduler()
    handle = scheduler.call_later(1.0, lambda: None)

    assert isinstance(handle, TimerHandle)
