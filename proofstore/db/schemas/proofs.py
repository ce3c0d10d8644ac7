from datetime import UTC, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proofstore.utils.proof_fields import (
    ENTRY_TYPE_PROOF,
    ProofCompletedEnum,
    ProofTypeEnum,
    RepoProblemEnum,
    is_repository_problem_name,
)


class ProofBase(BaseModel):
    entry_type: str = Field(ENTRY_TYPE_PROOF, alias="entryType")
    user_submitted: str = Field("", alias="userSubmitted")
    proof_name: str = Field("", alias="proofName")
    proof_type: ProofTypeEnum = Field(ProofTypeEnum.unset.value, alias="proofType")
    premise: List[str] = Field(default_factory=list)
    logic: List[str] = Field(default_factory=list)
    rules: List[str] = Field(default_factory=list)
    proof_completed: ProofCompletedEnum = Field(ProofCompletedEnum.false.value, alias="proofCompleted")
    conclusion: str = ""
    repo_problem: RepoProblemEnum = Field(RepoProblemEnum.false.value, alias="repoProblem")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    @field_validator("premise", "logic", "rules", mode="before")
    @classmethod
    def _null_sequence_is_empty(cls, value):
        # Clients send null for sequences they never filled in
        return [] if value is None else value

    @property
    def is_repository_problem(self) -> bool:
        return is_repository_problem_name(self.proof_name)


class ProofCreate(ProofBase):
    """Input form of a proof; ``id`` and ``timeSubmitted`` are ignored."""


class Proof(ProofBase):
    id: int
    time_submitted: datetime = Field(alias="timeSubmitted")
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, use_enum_values=True)

    @field_validator("time_submitted")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset; timestamps are always written in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
