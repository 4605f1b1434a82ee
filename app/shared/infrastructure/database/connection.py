# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the database that keeps user records, making sure we can talk to
# our data storage and handle many requests without overwhelming it.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with connection pooling, health checks with retry,
# schema creation and an explicit open/close lifecycle owned by the application lifespan.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - app/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL) or aiosqlite (SQLite) async drivers
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan startup/shutdown)
# - app/shared/infrastructure/database/session.py (session factory)
# - app/modules/user_management/infrastructure/database/models.py (Base)
# - app/api/v1/health.py (database health probe)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import MetaData, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    metadata = MetaData(naming_convention=convention)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and retry on health checks.

    One instance is created per application at startup and closed at shutdown.
    """

    def __init__(self, settings: Optional[Settings] = None, database_url: Optional[str] = None):
        self._settings = settings or get_settings()
        self._database_url = database_url or self._settings.database_url
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        params: Dict[str, Any] = {
            "url": self._database_url,
            "echo": self._settings.DB_ECHO,
        }

        # SQLite (tests, local runs) uses a static pool without sizing options
        if make_url(self._database_url).get_backend_name() == "sqlite":
            return params

        params.update({
            "pool_pre_ping": True,  # Validate connections before use
            "pool_recycle": self._settings.DB_POOL_RECYCLE,
            "pool_size": self._settings.DB_POOL_SIZE,
            "max_overflow": self._settings.DB_MAX_OVERFLOW,
            "pool_timeout": self._settings.DB_POOL_TIMEOUT,
            "connect_args": {
                "server_settings": {
                    "application_name": "user_records_backend",
                    "jit": "off"
                },
                "command_timeout": 60,
            },
        })
        return params

    async def initialize(self) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**self._build_connection_params())
            logger.info(f"Database engine created for backend {self._engine.url.get_backend_name()}")

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            raise DatabaseError(f"Database initialization failed: {e}", operation="initialize") from e

    async def create_all(self) -> None:
        """Create all tables registered on the declarative Base."""
        engine = self.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        try:
            logger.info("Closing database connection pool...")
            await self._engine.dispose()
            self._engine = None
            logger.info("Database connection pool closed successfully")

        except Exception as e:
            logger.error(f"Error closing database connection pool: {e}")
            raise

    @property
    def engine(self) -> AsyncEngine:
        """Get the SQLAlchemy async engine."""
        if self._engine is None:
            raise DatabaseError("Database engine not initialized", operation="engine")
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None
