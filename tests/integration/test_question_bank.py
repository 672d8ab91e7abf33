"""Integration tests for the question bank."""

import pytest
from sqlalchemy.exc import IntegrityError

from backoffice.core.exceptions import NotFoundError, ReferenceConflictError
from backoffice.schemas.candidature import CandidatureCreate
from backoffice.schemas.program import ProgramCreate
from backoffice.schemas.question import QuestionCreate
from backoffice.services.application_service import ApplicationService
from backoffice.services.catalog_service import ProgramService
from backoffice.services.question_bank import QuestionBank


class TestQuestionBank:
    """Tests for QuestionBank."""

    @pytest.fixture
    async def program_id(self, session_factory, sample_program):
        return await ProgramService(session_factory).create(
            ProgramCreate(**sample_program)
        )

    @pytest.mark.asyncio
    async def test_fetch_in_insertion_order(
        self, session_factory, program_id, abc_questions
    ):
        bank = QuestionBank(session_factory)
        for question in abc_questions(program_id):
            await bank.add_question(QuestionCreate(**question))

        questions = await bank.fetch_questions(program_id)

        assert [q.bonne_reponse for q in questions] == ["A", "B", "C"]
        assert [q.id for q in questions] == sorted(q.id for q in questions)
        assert questions[0].mauvaise1 == "X"

    @pytest.mark.asyncio
    async def test_fetch_is_repeatable(self, session_factory, program_id, abc_questions):
        bank = QuestionBank(session_factory)
        for question in abc_questions(program_id):
            await bank.add_question(QuestionCreate(**question))

        first = [q.id for q in await bank.fetch_questions(program_id)]
        second = [q.id for q in await bank.fetch_questions(program_id)]

        assert first == second

    @pytest.mark.asyncio
    async def test_unknown_program_returns_empty(self, session_factory):
        assert await QuestionBank(session_factory).fetch_questions(12345) == []

    @pytest.mark.asyncio
    async def test_missing_program_returns_empty(
        self, session_factory, program_id
    ):
        bank = QuestionBank(session_factory)
        await bank.add_question(QuestionCreate(question="Orpheline", bonne_reponse="A"))

        assert await bank.fetch_questions(None) == []

    @pytest.mark.asyncio
    async def test_delete_question(self, session_factory, program_id, abc_questions):
        bank = QuestionBank(session_factory)
        ids = [
            await bank.add_question(QuestionCreate(**question))
            for question in abc_questions(program_id)
        ]

        assert await bank.delete_question(ids[1]) == 1
        assert [q.bonne_reponse for q in await bank.fetch_questions(program_id)] == [
            "A",
            "C",
        ]

    @pytest.mark.asyncio
    async def test_delete_unknown_question(self, session_factory):
        with pytest.raises(NotFoundError):
            await QuestionBank(session_factory).delete_question(77)

    @pytest.mark.asyncio
    async def test_delete_answered_question(
        self, session_factory, program_id, abc_questions, sample_candidate
    ):
        """Questions referenced by recorded answers stay in place."""
        bank = QuestionBank(session_factory)
        ids = [
            await bank.add_question(QuestionCreate(**question))
            for question in abc_questions(program_id)
        ]
        await ApplicationService(session_factory).submit_application(
            CandidatureCreate(**sample_candidate, filiere_id=program_id, reponses=["A"])
        )

        with pytest.raises(ReferenceConflictError) as exc_info:
            await bank.delete_question(ids[0])

        assert isinstance(exc_info.value.__cause__, IntegrityError)

        assert len(await bank.fetch_questions(program_id)) == 3
