"""Tests for container wiring."""

import pytest
from pydantic import ValidationError

from fitness_tracker.adapters.json_file_record_repository import (
    JsonFileRecordRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.record_service.repository, JsonFileRecordRepository)
    assert container.stats_service.records is container.record_service
    assert container.backup_service.records is container.record_service
    assert container.stats_service.plan_end == settings.plan_end


def test_supabase_backend_requires_credentials() -> None:
    with pytest.raises(ValidationError):
        Settings(storage_backend="supabase", supabase_url=None)
