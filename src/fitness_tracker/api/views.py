"""Endpoints serving derived views: overview, charts, plan and calendar."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Path, Request

from fitness_tracker.api.models import DATE_PATTERN
from fitness_tracker.api.serializers import (
    serialize_charts,
    serialize_month,
    serialize_plan,
    serialize_tags,
)
from fitness_tracker.services.calendar import month_view, year_view

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(tags=["views"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/overview")
async def overview(request: Request) -> dict[str, object]:
    """Return today's totals against goals, latest weight and plan progress."""
    summary = _container(request).stats_service.get_overview()
    return {
        "today": summary.today,
        "calories": asdict(summary.calories),
        "protein": asdict(summary.protein),
        "gym_volume": summary.gym_volume,
        "latest_weight": summary.latest_weight,
        "plan": serialize_plan(summary.plan),
    }


@router.get("/charts")
async def charts(request: Request) -> dict[str, object]:
    """Return every chart series."""
    container = _container(request)
    return serialize_charts(
        container.stats_service.get_charts(),
        container.record_service.snapshot.unit,
    )


@router.get("/plan")
async def plan(request: Request) -> dict[str, object]:
    """Return progress on the workout plan."""
    return serialize_plan(_container(request).stats_service.get_plan())


@router.get("/days/{day}")
async def day_details(
    request: Request, day: str = Path(pattern=DATE_PATTERN)
) -> dict[str, object]:
    """Return everything logged on one day."""
    details = _container(request).stats_service.get_day_details(day)
    return {"date": day, "details": asdict(details) if details else None}


@router.get("/calendar/{year}")
async def calendar_year(
    request: Request, year: int = Path(ge=1, le=9999)
) -> dict[str, object]:
    """Return the twelve month grids of a year with data days flagged."""
    data_dates = _container(request).stats_service.get_data_dates()
    return {
        "year": year,
        "months": [serialize_month(view) for view in year_view(year, data_dates)],
    }


@router.get("/calendar/{year}/{month}")
async def calendar_month(
    request: Request,
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
) -> dict[str, object]:
    """Return one month grid with data days flagged."""
    data_dates = _container(request).stats_service.get_data_dates()
    return serialize_month(month_view(year, month, data_dates))


@router.get("/tags")
async def tags() -> dict[str, object]:
    """Return the exercise tag palette."""
    return {"tags": serialize_tags()}
