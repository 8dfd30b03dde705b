# models/interview.py
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # wire format is camelCase; snake_case is accepted on input too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


NonEmptyStr = Annotated[str, Field(min_length=1)]


class InterviewCreate(_CamelModel):
    title: NonEmptyStr
    description: Optional[str] = None
    # strict: numeric strings like "1700000000000" are rejected
    start_time: Union[StrictInt, StrictFloat]
    # any string, including "", is a valid status
    status: str
    stream_call_id: NonEmptyStr
    candidate_id: NonEmptyStr
    interviewer_ids: List[NonEmptyStr] = Field(..., min_length=1)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class StatusUpdate(_CamelModel):
    status: str


class InterviewCreated(_CamelModel):
    id: str


class InterviewOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    start_time: float
    status: str
    stream_call_id: str
    candidate_id: str
    interviewer_ids: List[str]
    end_time: Optional[int] = None
    creation_time: int
