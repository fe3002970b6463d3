"""Request DTOs for API endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class BrowseRequest(BaseModel):
    """Query parameters of the browse endpoint.

    ``type`` and ``page`` mirror the browsing page URL and are parsed
    leniently by the view state controller; ``toggle`` and ``step``
    apply one user action on top of that state.
    """

    type: str | None = Field(None, description="Comma-separated selected types, in selection order")
    page: str | None = Field(None, description="Current page (1-based)")
    toggle: str | None = Field(None, description="Type to add to or remove from the selection")
    step: Literal["next", "prev"] | None = Field(None, description="Move to the next or previous page")

    @property
    def page_delta(self) -> int:
        if self.step == "next":
            return 1
        if self.step == "prev":
            return -1
        return 0
