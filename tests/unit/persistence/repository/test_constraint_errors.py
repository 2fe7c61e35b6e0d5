"""Unit tests for reading constraint names from database errors."""

from sqlalchemy.exc import IntegrityError

from showcase.persistence.repository.errors import violated_constraint
from showcase.persistence.tables import (
    UQ_ACCOUNTS_EMAIL,
    UQ_ACCOUNTS_HANDLE,
)

CANDIDATES = (UQ_ACCOUNTS_EMAIL, UQ_ACCOUNTS_HANDLE)


class DriverError(Exception):
    """Stands in for an asyncpg error carrying the constraint name."""

    def __init__(self, constraint_name):
        super().__init__("duplicate key value violates unique constraint")
        self.constraint_name = constraint_name


class AdaptedError(Exception):
    """Stands in for SQLAlchemy's adapted DBAPI error."""


def integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO accounts ...", {}, orig)


class TestViolatedConstraint:
    def test_reads_name_from_driver_cause(self):
        """The asyncpg error hangs off the adapted error's __cause__."""
        adapted = AdaptedError("wrapped")
        adapted.__cause__ = DriverError(UQ_ACCOUNTS_HANDLE)

        assert violated_constraint(integrity_error(adapted), CANDIDATES) == (
            UQ_ACCOUNTS_HANDLE
        )

    def test_reads_name_from_orig(self):
        error = integrity_error(DriverError(UQ_ACCOUNTS_EMAIL))

        assert violated_constraint(error, CANDIDATES) == UQ_ACCOUNTS_EMAIL

    def test_falls_back_to_message(self):
        orig = AdaptedError(
            f'duplicate key value violates unique constraint "{UQ_ACCOUNTS_EMAIL}"'
        )

        assert violated_constraint(integrity_error(orig), CANDIDATES) == (
            UQ_ACCOUNTS_EMAIL
        )

    def test_unknown_constraint(self):
        orig = AdaptedError("null value in column violates not-null constraint")

        assert violated_constraint(integrity_error(orig), CANDIDATES) is None
