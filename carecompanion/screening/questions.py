"""
M-CHAT-R/F Question Bank

The 20 items of the Modified Checklist for Autism in Toddlers, Revised,
in administration order. The table and the set of inverted items are fixed
instrument content: changing either one changes scoring semantics and needs
revalidation against the published instrument.

IMPORTANT: M-CHAT-R/F is a screening heuristic. It does NOT diagnose.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class AnswerValue(str, Enum):
    YES = "yes"
    NO = "no"


class QuestionCategory(str, Enum):
    """Informational grouping of items. Not used in scoring."""
    JOINT_ATTENTION = "joint_attention"
    HEARING = "hearing"
    PRETEND_PLAY = "pretend_play"
    MOTOR = "motor"
    REPETITIVE_BEHAVIOR = "repetitive_behavior"
    POINTING = "pointing"
    SOCIAL_INTEREST = "social_interest"
    SHOWING = "showing"
    RESPONSE_TO_NAME = "response_to_name"
    SOCIAL_SMILE = "social_smile"
    SENSORY = "sensory"
    EYE_CONTACT = "eye_contact"
    IMITATION = "imitation"
    ATTENTION_SEEKING = "attention_seeking"
    COMPREHENSION = "comprehension"
    SOCIAL_REFERENCING = "social_referencing"


@dataclass(frozen=True)
class Question:
    """A single M-CHAT-R/F item."""
    id: int
    text: str
    category: QuestionCategory
    critical: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "category": self.category.value,
            "critical": self.critical,
        }


# =============================================================================
# QUESTION BANK
# =============================================================================

MCHAT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        text="If you point at something across the room, does your child look at it?",
        category=QuestionCategory.JOINT_ATTENTION,
        critical=True,
    ),
    Question(
        id=2,
        text="Have you ever wondered if your child might be deaf?",
        category=QuestionCategory.HEARING,
    ),
    Question(
        id=3,
        text="Does your child play pretend or make-believe?",
        category=QuestionCategory.PRETEND_PLAY,
        critical=True,
    ),
    Question(
        id=4,
        text="Does your child like climbing on things?",
        category=QuestionCategory.MOTOR,
    ),
    Question(
        id=5,
        text="Does your child make unusual finger movements near their eyes?",
        category=QuestionCategory.REPETITIVE_BEHAVIOR,
        critical=True,
    ),
    Question(
        id=6,
        text="Does your child point with one finger to ask for something or to get help?",
        category=QuestionCategory.POINTING,
        critical=True,
    ),
    Question(
        id=7,
        text="Does your child point with one finger to show you something interesting?",
        category=QuestionCategory.POINTING,
        critical=True,
    ),
    Question(
        id=8,
        text="Is your child interested in other children?",
        category=QuestionCategory.SOCIAL_INTEREST,
    ),
    Question(
        id=9,
        text="Does your child show you things by bringing them to you or holding them up for you to see?",
        category=QuestionCategory.SHOWING,
        critical=True,
    ),
    Question(
        id=10,
        text="Does your child respond when you call their name?",
        category=QuestionCategory.RESPONSE_TO_NAME,
    ),
    Question(
        id=11,
        text="When you smile at your child, does they smile back at you?",
        category=QuestionCategory.SOCIAL_SMILE,
    ),
    Question(
        id=12,
        text="Does your child get upset by everyday noises?",
        category=QuestionCategory.SENSORY,
    ),
    Question(
        id=13,
        text="Does your child walk?",
        category=QuestionCategory.MOTOR,
    ),
    Question(
        id=14,
        text="Does your child look you in the eye when you are talking to them, playing with them, or dressing them?",
        category=QuestionCategory.EYE_CONTACT,
    ),
    Question(
        id=15,
        text="Does your child try to copy what you do?",
        category=QuestionCategory.IMITATION,
        critical=True,
    ),
    Question(
        id=16,
        text="If you turn your head to look at something, does your child look around to see what you are looking at?",
        category=QuestionCategory.JOINT_ATTENTION,
        critical=True,
    ),
    Question(
        id=17,
        text="Does your child try to get you to watch them?",
        category=QuestionCategory.ATTENTION_SEEKING,
        critical=True,
    ),
    Question(
        id=18,
        text="Does your child understand when you tell them to do something?",
        category=QuestionCategory.COMPREHENSION,
    ),
    Question(
        id=19,
        text="If something new happens, does your child look at your face to see how you feel about it?",
        category=QuestionCategory.SOCIAL_REFERENCING,
        critical=True,
    ),
    Question(
        id=20,
        text="Does your child like movement activities?",
        category=QuestionCategory.MOTOR,
    ),
)

# Items where "yes" is the concerning answer. Every other item is
# concerning when answered "no".
INVERTED_ITEMS: frozenset[int] = frozenset({2, 5, 12})

QUESTIONS_BY_ID = MappingProxyType({q.id: q for q in MCHAT_QUESTIONS})


def get_question_by_id(question_id: int) -> Optional[Question]:
    """Look up an item by id. Returns None for ids outside the bank."""
    return QUESTIONS_BY_ID.get(question_id)


def concerning_answer(question_id: int) -> AnswerValue:
    """The answer value that counts toward the score for this item."""
    return AnswerValue.YES if question_id in INVERTED_ITEMS else AnswerValue.NO


def get_critical_question_ids() -> list[int]:
    """Ids of the critical items, in bank order."""
    return [q.id for q in MCHAT_QUESTIONS if q.critical]
