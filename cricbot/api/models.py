"""Pydantic models for API responses."""

from pydantic import BaseModel

from cricbot.core import DisplayPayload


class SelectOptionResponse(BaseModel):
    label: str
    value: str
    emoji: str


class ControlsResponse(BaseModel):
    """Interactive controls offered with a view."""

    match_id: str | None = None
    selector_options: list[SelectOptionResponse] = []
    refresh: bool = False


class PayloadResponse(BaseModel):
    """A rendered view, as the bot would post it."""

    title: str
    body: str
    color: int
    controls: ControlsResponse

    @classmethod
    def from_payload(cls, payload: DisplayPayload) -> "PayloadResponse":
        return cls.model_validate(payload.to_dict())


class SessionResponse(BaseModel):
    """Current-match session state."""

    current_match_id: str | None
    scorecard_state: str
    scorecard_fetched: bool
    scorecard_innings: int


class HealthResponse(BaseModel):
    status: str
    version: str
