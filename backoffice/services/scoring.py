"""Quiz scoring for admission applications."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from backoffice.models.question import Question

# Stored for questions the candidate left without an answer.
MISSING_ANSWER = ""


@dataclass
class ScoredAnswer:
    """Submitted answer to one question and whether it matched."""

    question_id: int
    submitted: str
    correct: bool


@dataclass
class ScoreResult:
    """Tally of a quiz submission."""

    score: int = 0
    total: int = 0
    answers: list[ScoredAnswer] = field(default_factory=list)


def score_answers(
    questions: Sequence[Question], answers: Sequence[str | None]
) -> ScoreResult:
    """Compare answers to questions position by position.

    Matching is exact and case-sensitive. Positions with no answer are
    recorded as ``MISSING_ANSWER`` and never count as correct; answers beyond
    the last question are ignored.
    """
    result = ScoreResult(total=len(questions))

    for index, question in enumerate(questions):
        submitted = answers[index] if index < len(answers) else None
        correct = submitted is not None and submitted == question.bonne_reponse
        if correct:
            result.score += 1

        result.answers.append(
            ScoredAnswer(
                question_id=question.id,
                submitted=MISSING_ANSWER if submitted is None else submitted,
                correct=correct,
            )
        )

    return result
