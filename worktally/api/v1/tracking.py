# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tracking API endpoints."""

from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktally.api.deps import get_db, get_now, get_tz, to_timestamp
from worktally.schemas.frame import (
    CancelResponse,
    CurrentFrameResponse,
    FrameResponse,
    RestartRequest,
    StartRequest,
    StartResponse,
    StatusResponse,
    StopRequest,
    StopResponse,
)
from worktally.services import tracking_service

router = APIRouter()


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=StatusResponse)
def get_status(db: Session = Depends(get_db)) -> StatusResponse:
    """Get the in-progress frame, if any."""
    current = tracking_service.get_current_frame(db)
    return StatusResponse(
        current_frame=CurrentFrameResponse.model_validate(current) if current else None
    )


@router.post("/start", response_model=StartResponse)
def start(
    data: StartRequest,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> StartResponse:
    """Start tracking a project, stopping the running one first."""
    try:
        current, stopped = tracking_service.start(
            db,
            data.project,
            data.tags,
            now,
            at=to_timestamp(data.at, tz),
            no_gap=data.no_gap,
        )
    except ValueError as e:
        raise _bad_request(e) from e

    return StartResponse(
        current_frame=CurrentFrameResponse.model_validate(current),
        stopped_frame=FrameResponse.model_validate(stopped) if stopped else None,
    )


@router.post("/stop", response_model=StopResponse)
def stop(
    data: StopRequest,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> StopResponse:
    """Stop the in-progress frame."""
    try:
        frame = tracking_service.stop(db, now, at=to_timestamp(data.at, tz))
    except ValueError as e:
        raise _bad_request(e) from e
    return StopResponse(stopped_frame=FrameResponse.model_validate(frame))


@router.post("/restart", response_model=StartResponse)
def restart(
    data: RestartRequest,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> StartResponse:
    """Restart the project of the last frame."""
    try:
        current = tracking_service.restart(
            db, now, at=to_timestamp(data.at, tz), no_gap=data.no_gap
        )
    except ValueError as e:
        raise _bad_request(e) from e
    return StartResponse(current_frame=CurrentFrameResponse.model_validate(current))


@router.post("/cancel", response_model=CancelResponse)
def cancel(db: Session = Depends(get_db)) -> CancelResponse:
    """Discard the in-progress frame."""
    try:
        current = tracking_service.cancel(db)
    except ValueError as e:
        raise _bad_request(e) from e
    return CancelResponse(cancelled_frame=CurrentFrameResponse.model_validate(current))
