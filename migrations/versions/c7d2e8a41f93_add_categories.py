"""add categories

Categories group projects for browsing. Projects keep their category
reference optional; deleting a category leaves its projects uncategorised.

Revision ID: c7d2e8a41f93
Revises: 9b4e6d1f0a27
Create Date: 2026-10-19 10:05:51.228406

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c7d2e8a41f93"
down_revision: Union[str, Sequence[str], None] = "9b4e6d1f0a27"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "categories",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("color", sa.String(50), nullable=True),
        sa.Column("gradient", sa.String(200), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )
    op.create_index("idx_categories_sort_order", "categories", ["sort_order"])

    op.add_column("projects", sa.Column("category_id", sa.UUID(), nullable=True))
    op.create_foreign_key(
        "fk_projects_category_id",
        "projects",
        "categories",
        ["category_id"],
        ["id"],
        ondelete="SET NULL",
    )
    op.create_index("idx_projects_category_id", "projects", ["category_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_projects_category_id", table_name="projects")
    op.drop_constraint("fk_projects_category_id", "projects", type_="foreignkey")
    op.drop_column("projects", "category_id")

    op.drop_index("idx_categories_sort_order", table_name="categories")
    op.drop_table("categories")
