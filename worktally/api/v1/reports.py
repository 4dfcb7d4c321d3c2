# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity report, balance and days-off summary API endpoints."""

from datetime import datetime, tzinfo

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from worktally.api.deps import get_db, get_now, get_tz, to_timestamp
from worktally.core.period import InvalidPeriodError, PeriodSelector, to_local_date
from worktally.core.types import Period
from worktally.schemas.report import (
    ActivityReportResponse,
    BalanceResponse,
    DaysOffSummaryResponse,
    ProjectDurationResponse,
    TimespanResponse,
)
from worktally.services import report_service
from worktally.services.report_service import PeriodQuery

router = APIRouter()


def get_period_query(
    period: PeriodSelector | None = None,
    from_: datetime | None = Query(None, alias="from"),
    to: datetime | None = None,
    project: str | None = None,
    tag: str | None = None,
    tz: tzinfo = Depends(get_tz),
) -> PeriodQuery:
    """Build a period query from request parameters."""
    if period is not None and (from_ is not None or to is not None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="'period' cannot be combined with 'from' or 'to'",
        )
    return PeriodQuery(
        selector=period,
        start=to_timestamp(from_, tz),
        end=to_timestamp(to, tz),
        project=project,
        tag=tag,
    )


def _timespan(period: Period) -> TimespanResponse:
    return TimespanResponse(from_=period.start, to=period.end)


@router.get("/activity", response_model=ActivityReportResponse)
def activity_report(
    query: PeriodQuery = Depends(get_period_query),
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> ActivityReportResponse:
    """Get the time spent per project and tag."""
    try:
        period, report = report_service.build_report(db, query, now, tz)
    except InvalidPeriodError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return ActivityReportResponse(
        projects={
            name: ProjectDurationResponse(duration=p.duration, tags=p.tags)
            for name, p in report.projects.items()
        },
        total_duration=report.total,
        timespan=_timespan(period),
    )


@router.get("/balance", response_model=BalanceResponse)
def balance(
    query: PeriodQuery = Depends(get_period_query),
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> BalanceResponse:
    """Compare the expected with the actual working time."""
    try:
        result = report_service.build_balance(db, query, now, tz)
    except InvalidPeriodError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return BalanceResponse(
        expected_working_seconds=result.expected,
        actual_working_seconds=result.actual,
        remaining_working_seconds=result.remaining,
        timespan=_timespan(result.period),
    )


@router.get("/days-off", response_model=DaysOffSummaryResponse)
def days_off_summary(
    year: int | None = None,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    tz: tzinfo = Depends(get_tz),
) -> DaysOffSummaryResponse:
    """Get allowed, taken and remaining vacation and sick days."""
    if year is None:
        year = to_local_date(now, tz).year

    summary = report_service.build_days_off_summary(db, year)
    return DaysOffSummaryResponse(
        year=summary.year,
        vacation_days_allowed=summary.vacation.allowed,
        vacation_days_taken=summary.vacation.taken,
        vacation_days_remaining=summary.vacation.remaining,
        sick_days_allowed=summary.sick.allowed,
        sick_days_taken=summary.sick.taken,
        sick_days_remaining=summary.sick.remaining,
    )
