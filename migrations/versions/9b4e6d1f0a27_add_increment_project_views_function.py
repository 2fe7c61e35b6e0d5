"""add increment_project_views function

Single-statement view increment used by the primary counting path.
Returns the new count, or NULL when the project does not exist.

Revision ID: 9b4e6d1f0a27
Revises: 3f1c9a2b7d40
Create Date: 2026-10-12 11:40:27.903115

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "9b4e6d1f0a27"
down_revision: Union[str, Sequence[str], None] = "3f1c9a2b7d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE OR REPLACE FUNCTION increment_project_views(target_id UUID)
        RETURNS INTEGER AS $$
            UPDATE projects
            SET views = views + 1
            WHERE id = target_id
            RETURNING views;
        $$ LANGUAGE sql VOLATILE
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP FUNCTION IF EXISTS increment_project_views(UUID)")
