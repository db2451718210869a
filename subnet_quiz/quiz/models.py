"""
Question records handed from the generator to the quiz session.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QuestionArchetype(str, Enum):
    """Supported subnetting question kinds."""

    USABLE_HOST_COUNT = "usable_host_count"
    HOST_RANGE = "host_range"
    SUBNET_MASK_LOOKUP = "subnet_mask_lookup"
    CIDR_FROM_MASK = "cidr_from_mask"
    IP_CONTAINMENT = "ip_containment"
    IP_CONTAINMENT_YES_NO = "ip_containment_yes_no"
    BROADCAST_ADDRESS = "broadcast_address"
    NETWORK_ADDRESS = "network_address"

    @property
    def points(self) -> int:
        return ARCHETYPE_POINTS[self]


# 10 for single-step lookups, 15 for multi-step / binary reasoning
ARCHETYPE_POINTS: dict[QuestionArchetype, int] = {
    QuestionArchetype.USABLE_HOST_COUNT: 10,
    QuestionArchetype.HOST_RANGE: 15,
    QuestionArchetype.SUBNET_MASK_LOOKUP: 10,
    QuestionArchetype.CIDR_FROM_MASK: 10,
    QuestionArchetype.IP_CONTAINMENT: 15,
    QuestionArchetype.IP_CONTAINMENT_YES_NO: 10,
    QuestionArchetype.BROADCAST_ADDRESS: 15,
    QuestionArchetype.NETWORK_ADDRESS: 15,
}

YES = "Yes"
NO = "No"


class Question(BaseModel):
    """
    One multiple-choice question.

    Attributes:
        id: Sequential identifier within a question set (1-based)
        prompt: Natural-language question text
        options: 4 option strings (2 for Yes/No questions), pairwise distinct
        correct_index: Index into `options` of the single correct answer
        archetype: Which generator produced the question
        points: Score awarded for a correct answer
        explanation: Worked solution with the question's concrete numbers
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    prompt: str = Field(min_length=1)
    options: tuple[str, ...]
    correct_index: int
    archetype: QuestionArchetype
    points: int = Field(gt=0)
    explanation: str = ""

    @model_validator(mode="after")
    def _check_options(self) -> "Question":
        if len(self.options) not in (2, 4):
            raise ValueError(f"expected 2 or 4 options, got {len(self.options)}")
        if len(set(self.options)) != len(self.options):
            raise ValueError(f"duplicate options: {list(self.options)}")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(f"correct_index {self.correct_index} out of bounds")
        return self

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]

    def is_correct(self, selected_index: int) -> bool:
        return selected_index == self.correct_index

    def with_id(self, new_id: int) -> "Question":
        return self.model_copy(update={"id": new_id})
