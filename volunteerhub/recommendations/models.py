from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    id: str
    title: str
    description: str = ""
    location: str = ""
    date: date
    time: str | None = None
    category: str | None = None
    image_url: str | None = None
    requirements: str | None = None
    volunteers_needed: int = 0
    current_volunteers: int = 0
    organization_id: str | None = None
    organization_contact: str | None = None


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    date: date
    time: str | None = None
    category: str | None = None
    image_url: str | None = None
    requirements: str | None = None
    volunteers_needed: int = Field(default=1, ge=1)
    organization_contact: str | None = None


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    interests: str | None = None
    user_id: str | None = Field(default=None, alias="userId")
    search_history: list[str] | None = Field(default=None, alias="searchHistory")


class RecommendedEvent(BaseModel):
    id: str
    title: str
    date: date
    location: str
    description: str
    image_url: str | None = None
    category: str | None = None
    reason: str = Field(..., min_length=1)

    @classmethod
    def from_event(cls, event: Event, reason: str) -> "RecommendedEvent":
        return cls(
            id=event.id,
            title=event.title,
            date=event.date,
            location=event.location,
            description=event.description,
            image_url=event.image_url,
            category=event.category,
            reason=reason,
        )


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recommended_events: list[RecommendedEvent] = Field(
        default_factory=list, alias="recommendedEvents", max_length=3,
    )


class ErrorResponse(BaseModel):
    error: str


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegistrationRequest(BaseModel):
    emergency_contact: str | None = None
    dietary_restrictions: str | None = None
    notes: str | None = None


class Registration(BaseModel):
    id: str
    event_id: str
    user_id: str
    registration_time: float
    emergency_contact: str | None = None
    dietary_restrictions: str | None = None
    notes: str | None = None


class Profile(BaseModel):
    id: str
    role: str
    full_name: str | None = None
    phone: str | None = None
    bio: str | None = None
    location: str | None = None
    profile_image_url: str | None = None
    organization_name: str | None = None
    organization_description: str | None = None
    organization_website: str | None = None


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    phone: str | None = None
    bio: str | None = None
    location: str | None = None
    profile_image_url: str | None = None
    organization_name: str | None = None
    organization_description: str | None = None
    organization_website: str | None = None


class DashboardStats(BaseModel):
    total_events: int = 0
    active_events: int = 0
    completed_events: int = 0
    total_volunteers: int = 0


class OrganizationDashboard(BaseModel):
    events: list[Event] = Field(default_factory=list)
    stats: DashboardStats = Field(default_factory=DashboardStats)
