"""
Tests for the M-CHAT-R/F question bank.
"""

import dataclasses

import pytest

from carecompanion.screening.questions import (
    MCHAT_QUESTIONS,
    INVERTED_ITEMS,
    AnswerValue,
    QuestionCategory,
    concerning_answer,
    get_question_by_id,
    get_critical_question_ids,
)


class TestQuestionBank:
    """Tests for the fixed question table."""

    def test_twenty_items_in_administration_order(self):
        assert len(MCHAT_QUESTIONS) == 20
        assert [q.id for q in MCHAT_QUESTIONS] == list(range(1, 21))

    def test_critical_items(self):
        assert get_critical_question_ids() == [1, 3, 5, 6, 7, 9, 15, 16, 17, 19]

    def test_inverted_items(self):
        assert INVERTED_ITEMS == frozenset({2, 5, 12})

    def test_inverted_items_are_independent_of_critical_flag(self):
        assert get_question_by_id(5).critical is True
        assert get_question_by_id(2).critical is False
        assert get_question_by_id(12).critical is False

    def test_categories(self):
        for question in MCHAT_QUESTIONS:
            assert question.category in QuestionCategory
            assert question.text.endswith("?")
        assert get_question_by_id(1).category == QuestionCategory.JOINT_ATTENTION
        assert get_question_by_id(12).category == QuestionCategory.SENSORY

    def test_get_question_by_id_unknown(self):
        assert get_question_by_id(0) is None
        assert get_question_by_id(21) is None

    def test_questions_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            MCHAT_QUESTIONS[0].critical = False

    def test_concerning_answer_polarity(self):
        assert concerning_answer(2) == AnswerValue.YES
        assert concerning_answer(5) == AnswerValue.YES
        assert concerning_answer(12) == AnswerValue.YES
        assert concerning_answer(1) == AnswerValue.NO
        assert concerning_answer(20) == AnswerValue.NO

    def test_to_dict(self):
        assert get_question_by_id(13).to_dict() == {
            "id": 13,
            "text": "Does your child walk?",
            "category": "motor",
            "critical": False,
        }
