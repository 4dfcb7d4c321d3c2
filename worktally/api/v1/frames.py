# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Frame, project and tag API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktally.api.deps import get_db, get_now
from worktally.schemas.common import MessageResponse
from worktally.schemas.frame import FrameResponse, NameListResponse, RenameRequest
from worktally.services import frame_service

router = APIRouter()


@router.get("/frames", response_model=list[FrameResponse])
def list_frames(db: Session = Depends(get_db)) -> list[FrameResponse]:
    """List all recorded frames in chronological order."""
    return [FrameResponse.model_validate(f) for f in frame_service.get_frames(db)]


@router.get("/projects", response_model=NameListResponse)
def list_projects(db: Session = Depends(get_db)) -> NameListResponse:
    """List all projects."""
    return NameListResponse(names=frame_service.list_projects(db))


@router.put("/projects/{name}", response_model=MessageResponse)
def rename_project(
    name: str,
    data: RenameRequest,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
) -> MessageResponse:
    """Rename a project."""
    try:
        frame_service.rename_project(db, name, data.new_name, now)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return MessageResponse(message=f"Project renamed from '{name}' to '{data.new_name}'.")


@router.get("/tags", response_model=NameListResponse)
def list_tags(db: Session = Depends(get_db)) -> NameListResponse:
    """List all tags."""
    return NameListResponse(names=frame_service.list_tags(db))


@router.put("/tags/{name}", response_model=MessageResponse)
def rename_tag(
    name: str,
    data: RenameRequest,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
) -> MessageResponse:
    """Rename a tag."""
    try:
        frame_service.rename_tag(db, name, data.new_name, now)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return MessageResponse(message=f"Tag renamed from '{name}' to '{data.new_name}'.")


@router.delete("/tags/{name}", response_model=MessageResponse)
def remove_tag(
    name: str,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
) -> MessageResponse:
    """Remove a tag from all frames."""
    frame_service.remove_tag(db, name, now)
    return MessageResponse(message=f"Tag '{name}' removed from all frames.")
