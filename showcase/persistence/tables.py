"""SQLAlchemy table definitions for the project directory.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Unique constraint names, used to tell which column rejected an insert
UQ_ACCOUNTS_AUTH_ID = "uq_accounts_auth_id"
UQ_ACCOUNTS_EMAIL = "uq_accounts_email"
UQ_ACCOUNTS_HANDLE = "uq_accounts_handle"
UQ_PROJECTS_SLUG = "uq_projects_slug"
UQ_CATEGORIES_SLUG = "uq_categories_slug"

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("auth_id", String(255), nullable=False),  # External auth subject
    Column("email", String(255), nullable=False),
    Column("handle", String(64), nullable=False),  # Public username
    Column("display_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="submitter"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("auth_id", name=UQ_ACCOUNTS_AUTH_ID),
    UniqueConstraint("email", name=UQ_ACCOUNTS_EMAIL),
    UniqueConstraint("handle", name=UQ_ACCOUNTS_HANDLE),
    CheckConstraint(
        "role IN ('submitter', 'creator', 'admin')", name="ck_accounts_role"
    ),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("icon", String(50), nullable=True),
    Column("color", String(50), nullable=True),
    Column("gradient", String(200), nullable=True),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slug", name=UQ_CATEGORIES_SLUG),
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("description", Text, nullable=False),
    Column("website_url", Text, nullable=True),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slug", name=UQ_PROJECTS_SLUG),
    CheckConstraint("views >= 0", name="ck_projects_views_non_negative"),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)
Index("idx_projects_created_at", projects_table.c.created_at.desc())
Index("idx_projects_category_id", projects_table.c.category_id)
Index("idx_categories_sort_order", categories_table.c.sort_order)
