from __future__ import annotations

import logging
import os

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics, compute_dashboard
from .analytics.store import get_usage
from .auth.dependencies import get_current_user, require_organization, require_user, require_volunteer
from .auth.users import authenticate, landing_path
from .recommendations.models import (
    ErrorResponse,
    Event,
    EventCreate,
    LoginRequest,
    OrganizationDashboard,
    Profile,
    ProfileUpdate,
    RecommendationRequest,
    RecommendationResponse,
    Registration,
    RegistrationRequest,
)
from .recommendations.service import (
    EventsUnavailableError,
    Stores,
    get_ai_recommendations,
    get_recommendations,
    get_stores,
)
from .store.errors import (
    AlreadyRegisteredError,
    EventNotFoundError,
    ProfileFieldError,
    RegistrationClosedError,
    StoreError,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Volunteer Event Recommendation API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "volunteerhub-secret-change-in-production"),
)

_UNAVAILABLE = {503: {"model": ErrorResponse}}


def _user_id(user: dict | None, body: RecommendationRequest) -> str | None:
    if user:
        return user["id"]
    return body.user_id


def _owned_event(event_id: str, user: dict, stores: Stores) -> Event:
    try:
        event = stores.events.get(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    if event.organization_id != user["id"]:
        raise HTTPException(status_code=403, detail="Not your event")
    return event


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/events", response_model=list[Event], responses=_UNAVAILABLE)
def list_events(stores: Stores = Depends(get_stores)) -> list[Event]:
    try:
        return stores.events.upcoming()
    except StoreError:
        logger.warning("Listing upcoming events failed", exc_info=True)
        raise HTTPException(status_code=503, detail="Events are temporarily unavailable")


@app.get("/events/{event_id}", response_model=Event)
def event_details(event_id: str, stores: Stores = Depends(get_stores)) -> Event:
    try:
        return stores.events.get(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user, "redirect": landing_path(user["role"])}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse, responses=_UNAVAILABLE)
def recommendations(
    body: RecommendationRequest,
    user: dict | None = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
):
    try:
        return get_recommendations(body, _user_id(user, body), stores=stores)
    except EventsUnavailableError as exc:
        return JSONResponse(status_code=503, content={"error": str(exc)})


@app.post("/recommendations/ai", response_model=RecommendationResponse, responses=_UNAVAILABLE)
def ai_recommendations(
    body: RecommendationRequest,
    user: dict | None = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
):
    try:
        return get_ai_recommendations(body, _user_id(user, body), stores=stores)
    except EventsUnavailableError as exc:
        return JSONResponse(status_code=503, content={"error": str(exc)})


# ── Volunteer endpoints ──────────────────────────────────────────────────


@app.post("/events/{event_id}/register", response_model=Registration, status_code=201)
def register_for_event(
    event_id: str,
    body: RegistrationRequest | None = Body(default=None),
    user: dict = Depends(require_volunteer),
    stores: Stores = Depends(get_stores),
) -> Registration:
    if stores.registrations.is_registered(event_id, user["id"]):
        raise HTTPException(status_code=409, detail="You are already registered for this event")
    try:
        stores.events.reserve_spot(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except RegistrationClosedError as exc:
        raise HTTPException(status_code=409, detail=str(exc))

    try:
        return stores.registrations.register(event_id, user["id"], body)
    except AlreadyRegisteredError:
        stores.events.release_spot(event_id)
        raise HTTPException(status_code=409, detail="You are already registered for this event")


@app.get("/search-history")
def search_history(
    user: dict = Depends(require_user),
    stores: Stores = Depends(get_stores),
) -> dict:
    try:
        history = stores.history.recent(user["id"])
    except StoreError:
        logger.warning("Could not load search history for %s", user["id"], exc_info=True)
        history = []
    return {"searchHistory": history}


# ── Profile endpoints ────────────────────────────────────────────────────


@app.get("/profile", response_model=Profile)
def get_profile(
    user: dict = Depends(require_user),
    stores: Stores = Depends(get_stores),
) -> Profile:
    return stores.profiles.get(user["id"], user["role"])


@app.put("/profile", response_model=Profile)
def update_profile(
    body: ProfileUpdate,
    user: dict = Depends(require_user),
    stores: Stores = Depends(get_stores),
) -> Profile:
    try:
        return stores.profiles.update(user["id"], user["role"], body)
    except ProfileFieldError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


# ── Organization endpoints ───────────────────────────────────────────────


@app.post("/events", response_model=Event, status_code=201)
def create_event(
    body: EventCreate,
    user: dict = Depends(require_organization),
    stores: Stores = Depends(get_stores),
) -> Event:
    return stores.events.create(body, organization_id=user["id"])


@app.put("/events/{event_id}", response_model=Event)
def update_event(
    event_id: str,
    body: EventCreate,
    user: dict = Depends(require_organization),
    stores: Stores = Depends(get_stores),
) -> Event:
    _owned_event(event_id, user, stores)
    return stores.events.update(event_id, body)


@app.get("/organization/events", response_model=OrganizationDashboard)
def organization_events(
    user: dict = Depends(require_organization),
    stores: Stores = Depends(get_stores),
) -> OrganizationDashboard:
    events = stores.events.for_organization(user["id"])
    return OrganizationDashboard(events=events, stats=compute_dashboard(events))


@app.get("/events/{event_id}/registrations", response_model=list[Registration])
def event_registrations(
    event_id: str,
    user: dict = Depends(require_organization),
    stores: Stores = Depends(get_stores),
) -> list[Registration]:
    _owned_event(event_id, user, stores)
    return stores.registrations.for_event(event_id)


@app.get("/analytics")
def analytics(user: dict = Depends(require_organization)) -> dict:
    return compute_analytics(get_usage())
