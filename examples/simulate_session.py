"""
Run a practice session headlessly on a virtual clock.

This script:
1. Builds a session controller with a seeded challenge generator
2. Starts a 5-second timed session
3. Answers each challenge (every third answer deliberately wrong)
4. Prints the session summary when time runs out

No server or real waiting is involved; ManualScheduler drives time.
"""

import random
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.domain.entities import Difficulty, Operator, PracticeConfig, SessionEndedMessage
from src.domain.services import PracticeSessionController
from src.infrastructure.expression_challenge_provider import ExpressionChallengeProvider
from src.infrastructure.manual_scheduler import ManualScheduler
from src.infrastructure.sympy_answer_verifier import SympyAnswerVerifier


def simulate(seed: int = 2024) -> None:
    scheduler = ManualScheduler()
    session = PracticeSessionController(
        challenge_provider=ExpressionChallengeProvider(random.Random(seed)),
        answer_verifier=SympyAnswerVerifier(),
        scheduler=scheduler,
    )
    session.set_total_time(5)
    session.configure(
        PracticeConfig(
            difficulty=Difficulty.NORMAL,
            operators=frozenset({Operator.ADDITION, Operator.MULTIPLICATION}),
        )
    )

    print("=" * 60)
    attempt = 0
    while session.is_active:
        attempt += 1
        challenge = session.state.current_challenge
        answer = "0" if attempt % 3 == 0 else challenge.canonical_form
        session.set_answer(answer)
        correct = session.submit_answer()
        print(f"{challenge.display_form:<30} answered {answer:<20} {'✓' if correct else '✗'}")
        # Think for 0.7 seconds before the next answer
        scheduler.advance(0.7)

    while not session.outbound_queue.empty():
        message = session.outbound_queue.get_nowait()
        if isinstance(message, SessionEndedMessage):
            print("=" * 60)
            print(f"Session ended: {message.reason}")
            print(f"  - Correct answers: {message.summary.correct_count}")
            print(f"  - Best streak: {message.summary.best_streak}")
            print(f"  - Questions served: {message.summary.questions_served}")


if __name__ == "__main__":
    simulate()
