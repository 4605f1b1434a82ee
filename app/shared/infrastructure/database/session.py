# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database), making sure each
# piece of work gets its own clean session and that failed work is rolled back.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management: builds the async_sessionmaker from an initialized
# engine and exposes a transactional session context manager.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan wiring)
# - app/modules/user_management/infrastructure/database/user_repository_impl.py

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.connection import DatabaseConnectionManager

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, connection_manager: DatabaseConnectionManager):
        self._connection_manager = connection_manager
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self) -> async_sessionmaker:
        """Initialize the session factory with database engine."""
        self._session_factory = async_sessionmaker(
            self._connection_manager.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=False,
        )
        logger.info("Database session factory initialized successfully")
        return self._session_factory

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="session_factory")
        return self._session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session inside a transaction.

        Commits when the block exits normally, rolls back when it raises.
        Exceptions propagate unchanged.

        Yields:
            AsyncSession: Database session
        """
        async with self.session_factory() as session:
            async with session.begin():
                logger.debug("Database session created")
                yield session
            logger.debug("Database transaction finished")
