from typing import Any, Dict, List, Optional, Sequence

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import create_application
from app.modules.user_management.domain.models.user import UserRecord
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.asset_intake import AssetIntake
from app.modules.user_management.domain.services.user_service import UserRecordService
from app.modules.user_management.infrastructure.database import models  # noqa: F401
from app.modules.user_management.infrastructure.database.user_repository_impl import (
    SQLAlchemyUserRepository,
)
from app.shared.config.settings import Settings
from app.shared.core.exceptions import DuplicateKeyError, RecordNotFoundError
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.infrastructure.storage.file_manager import FileManager


class InMemoryUserRepository(UserRepository):
	"""Dict-backed repository with the same error contract as the SQL one."""

	def __init__(self) -> None:
		self.rows: Dict[int, Dict[str, Any]] = {}
		self._next_id = 1
		self.update_calls: List[int] = []

	def _check_email(self, email: Optional[str], exclude_id: Optional[int] = None) -> None:
		if email is None:
			return
		for row_id, row in self.rows.items():
			if row_id != exclude_id and row.get("email") == email:
				raise DuplicateKeyError(value=email)

	def _record(self, row_id: int) -> UserRecord:
		return UserRecord(id=row_id, **self.rows[row_id])

	def _defaults(self, payload: Dict[str, Any]) -> Dict[str, Any]:
		row = {
			"name": None, "email": None, "password": None, "description": None,
			"specialty": None, "profile_photo": None, "likes": 0, "reviews": 0, "stars": 0.0,
		}
		row.update(payload)
		return row

	async def get_by_id(self, record_id: int) -> Optional[UserRecord]:
		return self._record(record_id) if record_id in self.rows else None

	async def list_all(self) -> List[UserRecord]:
		return [self._record(row_id) for row_id in sorted(self.rows)]

	async def create(self, payload: Dict[str, Any]) -> UserRecord:
		self._check_email(payload.get("email"))
		row_id = self._next_id
		self._next_id += 1
		self.rows[row_id] = self._defaults(payload)
		return self._record(row_id)

	async def create_many(self, payloads: Sequence[Dict[str, Any]]) -> int:
		snapshot, next_id = dict(self.rows), self._next_id
		try:
			for payload in payloads:
				await self.create(payload)
		except DuplicateKeyError:
			self.rows, self._next_id = snapshot, next_id
			raise
		return len(payloads)

	async def update(self, record_id: int, payload: Dict[str, Any]) -> UserRecord:
		self.update_calls.append(record_id)
		if record_id not in self.rows:
			raise RecordNotFoundError(record_id)
		if "email" in payload:
			self._check_email(payload["email"], exclude_id=record_id)
		self.rows[record_id].update(payload)
		return self._record(record_id)

	async def delete(self, record_id: int) -> UserRecord:
		if record_id not in self.rows:
			raise RecordNotFoundError(record_id)
		record = self._record(record_id)
		del self.rows[record_id]
		return record


@pytest.fixture
def test_settings(tmp_path) -> Settings:
	return Settings(
		ENVIRONMENT="test",
		DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
		UPLOAD_DIR=str(tmp_path / "uploads"),
		AUTO_CREATE_TABLES=True,
		LOG_FORMAT="text",
		LOG_LEVEL="WARNING",
		MAX_IMAGE_SIZE=1024,
	)


@pytest.fixture
def file_manager(test_settings) -> FileManager:
	manager = FileManager(settings=test_settings)
	manager.initialize()
	return manager


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
	return InMemoryUserRepository()


@pytest.fixture
def service(memory_repository, file_manager) -> UserRecordService:
	return UserRecordService(memory_repository, AssetIntake(file_manager))


@pytest_asyncio.fixture
async def session_manager(test_settings):
	db_manager = DatabaseConnectionManager(settings=test_settings)
	await db_manager.initialize()
	await db_manager.create_all()
	sessions = DatabaseSessionManager(db_manager)
	sessions.initialize()
	try:
		yield sessions
	finally:
		await db_manager.close()


@pytest.fixture
def sql_repository(session_manager) -> SQLAlchemyUserRepository:
	return SQLAlchemyUserRepository(session_manager)


@pytest_asyncio.fixture
async def app(test_settings):
	application = create_application(test_settings)
	async with application.router.lifespan_context(application):
		yield application


@pytest_asyncio.fixture
async def api_client(app):
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
