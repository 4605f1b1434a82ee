# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user records are laid out in the database table.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``users`` table backing the UserRecord domain model,
# with an integer auto-increment key and a unique email constraint.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations/env.py (metadata for autogeneration)

from sqlalchemy import Column, Float, Integer, String, Text

from app.shared.infrastructure.database.connection import Base


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for user records.

    Every column except ``id`` and the counters is nullable; the unique email
    index is the only schema-level business rule.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True, unique=True, index=True)
    password = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    specialty = Column(String(255), nullable=True)
    profile_photo = Column(String(255), nullable=True)

    # Engagement metrics
    likes = Column(Integer, nullable=False, default=0)
    reviews = Column(Integer, nullable=False, default=0)
    stars = Column(Float, nullable=False, default=0.0)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"
