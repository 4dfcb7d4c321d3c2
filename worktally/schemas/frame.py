# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Frame and tracking schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _strip_tag_prefix(tags: list[str]) -> list[str]:
    cleaned = [tag.removeprefix("+").strip() for tag in tags]
    if any(not tag for tag in cleaned):
        raise ValueError("Tags must not be empty")
    return cleaned


class FrameResponse(BaseModel):
    """Schema for a recorded frame."""

    model_config = ConfigDict(from_attributes=True)

    start_time: int
    end_time: int
    project: str
    tags: list[str] = []
    updated_at: int


class CurrentFrameResponse(BaseModel):
    """Schema for the in-progress frame."""

    model_config = ConfigDict(from_attributes=True)

    project: str
    tags: list[str] = []
    start_time: int


class StartRequest(BaseModel):
    """Request schema for starting to track a project."""

    project: str = Field(..., min_length=1, max_length=200)
    tags: list[str] = []
    at: datetime | None = None
    no_gap: bool = False

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Accept tags written as ``+tag``."""
        return _strip_tag_prefix(v)

    @model_validator(mode="after")
    def check_start_options(self) -> "StartRequest":
        """Reject combining an explicit start time with no_gap."""
        if self.at is not None and self.no_gap:
            raise ValueError("Cannot use 'at' and 'no_gap' together")
        return self


class RestartRequest(BaseModel):
    """Request schema for restarting the last project."""

    at: datetime | None = None
    no_gap: bool = False

    @model_validator(mode="after")
    def check_start_options(self) -> "RestartRequest":
        """Reject combining an explicit start time with no_gap."""
        if self.at is not None and self.no_gap:
            raise ValueError("Cannot use 'at' and 'no_gap' together")
        return self


class StopRequest(BaseModel):
    """Request schema for stopping the current frame."""

    at: datetime | None = None


class StartResponse(BaseModel):
    """Response schema after starting or restarting."""

    current_frame: CurrentFrameResponse
    stopped_frame: FrameResponse | None = None


class StopResponse(BaseModel):
    """Response schema after stopping."""

    stopped_frame: FrameResponse


class CancelResponse(BaseModel):
    """Response schema after cancelling."""

    cancelled_frame: CurrentFrameResponse


class StatusResponse(BaseModel):
    """Response schema for the current tracking status."""

    current_frame: CurrentFrameResponse | None = None


class RenameRequest(BaseModel):
    """Request schema for renaming a project or tag."""

    new_name: str = Field(..., min_length=1, max_length=200)


class NameListResponse(BaseModel):
    """Sorted list of project or tag names."""

    names: list[str]
