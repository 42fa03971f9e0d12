"""Database Session Manager — rollback and error mapping.

Tests cover:
    - SQLAlchemy failures inside a session surface as DatabaseError
    - Domain errors pass through untouched after rollback
    - Flushed but uncommitted rows are discarded when the session fails
    - Health check reflects connectivity
"""

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from webae.core.errors import DatabaseError, ResourceNotFoundError
from webae.db.base import Base
from webae.infrastructure.database import DatabaseSessionManager, get_db
from webae.models.metadata import Metadata
import webae.infrastructure.database as db_module


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


@pytest.fixture
async def file_manager(tmp_path):
    """Manager on a file database, so separate sessions see only committed data."""
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'webae.db'}")
    async with m.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield m
    await m.dispose()


async def _titles(manager: DatabaseSessionManager) -> list[str]:
    async with manager.session() as db:
        result = await db.execute(select(Metadata).order_by(Metadata.id))
        return [m.title for m in result.scalars().all()]


async def test_sqlalchemy_error_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503


async def test_domain_errors_propagate_unchanged(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Metadata", "1")


async def test_failed_session_discards_flushed_rows(file_manager):
    with pytest.raises(DatabaseError):
        async with file_manager.session() as db:
            db.add(Metadata(title="uncommitted"))
            await db.flush()
            raise SQLAlchemyError("write failed")

    assert await _titles(file_manager) == []


async def test_domain_error_discards_flushed_rows(file_manager):
    with pytest.raises(ResourceNotFoundError):
        async with file_manager.session() as db:
            db.add(Metadata(title="uncommitted"))
            await db.flush()
            raise ResourceNotFoundError("Metadata", "1")

    assert await _titles(file_manager) == []


async def test_rollback_keeps_earlier_commits(file_manager):
    with pytest.raises(DatabaseError):
        async with file_manager.session() as db:
            db.add(Metadata(title="kept"))
            await db.commit()
            db.add(Metadata(title="dropped"))
            await db.flush()
            raise SQLAlchemyError("write failed")

    assert await _titles(file_manager) == ["kept"]


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        await get_db().__anext__()
