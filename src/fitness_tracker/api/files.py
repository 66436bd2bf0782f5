"""Endpoints for backup, restore, food import and CSV export."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import Response

from fitness_tracker.services.backup import LogKind

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(tags=["files"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/backup")
async def download_backup(request: Request) -> Response:
    """Return the full record set as a backup file."""
    backup_service = _container(request).backup_service
    return Response(
        content=backup_service.export_backup_json(),
        media_type="application/json",
        headers=_attachment(backup_service.backup_filename()),
    )


@router.post("/backup/restore")
async def restore_backup(request: Request) -> dict[str, object]:
    """Restore collections from a backup file sent as the request body."""
    restored = _container(request).backup_service.restore_backup(await request.body())
    return {"status": "ok", "restored": restored}


@router.post("/foods/import")
async def import_foods(request: Request) -> dict[str, object]:
    """Import foods from a JSON file sent as the request body."""
    added = _container(request).backup_service.import_foods(await request.body())
    return {"status": "ok", "added": added}


@router.get("/export/{kind}.csv")
async def export_csv(kind: LogKind, request: Request) -> Response:
    """Return one log as a CSV file."""
    backup_service = _container(request).backup_service
    return Response(
        content=backup_service.export_csv(kind),
        media_type="text/csv",
        headers=_attachment(backup_service.csv_filename(kind)),
    )
