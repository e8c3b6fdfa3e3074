from pydantic import BaseModel, Field


class Segment(BaseModel):
    start: float = Field(ge=0.0)
    end: float = Field(ge=0.0)
    text: str


class TranscriptResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
