"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.json_file_record_repository import (
    JsonFileRecordRepository,
)
from fitness_tracker.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.backup import BackupService
from fitness_tracker.services.records import RecordRepository, RecordService
from fitness_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_service: RecordService
    stats_service: StatsService
    backup_service: BackupService


def build_repository(settings: Settings) -> RecordRepository:
    """Create the record repository for the configured backend."""
    if settings.storage_backend == "supabase":
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordRepository(client, table_name=settings.supabase_table)
    return JsonFileRecordRepository(settings.data_file)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return build_container_for(resolved_settings, build_repository(resolved_settings))


def build_container_for(
    settings: Settings, repository: RecordRepository
) -> AppContainer:
    """Wire services around an existing repository."""
    record_service = RecordService(repository)
    stats_service = StatsService(
        records=record_service,
        plan_start=settings.plan_start,
        plan_end=settings.plan_end,
        weekly_target=settings.plan_weekly_target,
    )
    backup_service = BackupService(record_service)
    return AppContainer(
        settings=settings,
        record_service=record_service,
        stats_service=stats_service,
        backup_service=backup_service,
    )
