"""
Calendar request schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator


class CalendarItem(BaseModel):
    """A calendar to include in a free/busy query"""
    model_config = ConfigDict(extra="allow")

    id: str


class FreeBusyQuery(BaseModel):
    """Free/busy request body - bounds default to now and now + window"""
    model_config = ConfigDict(populate_by_name=True)

    items: List[CalendarItem] = Field(min_length=1)
    time_min: Optional[datetime] = Field(default=None, alias="timeMin")
    time_max: Optional[datetime] = Field(default=None, alias="timeMax")


class Attendee(BaseModel):
    """Event attendee - extra provider fields (displayName, optional...) pass through"""
    model_config = ConfigDict(extra="allow")

    email: str


class EventDraft(BaseModel):
    """Event creation request body - start and end must carry a UTC offset"""
    summary: str = Field(min_length=1)
    description: Optional[str] = None
    start: AwareDatetime
    end: AwareDatetime
    attendees: List[Attendee] = Field(default_factory=list)

    @field_validator("attendees", mode="before")
    @classmethod
    def _none_means_no_attendees(cls, value):
        return [] if value is None else value

    @model_validator(mode="after")
    def _end_after_start(self) -> "EventDraft":
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self
