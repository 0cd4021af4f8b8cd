"""Translation of SQLAlchemy failures into the persistence error taxonomy."""

from collections.abc import Generator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.orm import Session

from provisioner.exceptions import (
    PersistenceConflictError,
    PersistenceError,
    PersistenceReferenceError,
    PersistenceRejectedError,
    PersistenceUnavailableError,
)

logger = structlog.get_logger(__name__)

# SQLSTATE codes (PostgreSQL and other SQL-standard drivers)
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


def _sqlstate(error: DBAPIError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_integrity_error(error: IntegrityError, entity: str) -> PersistenceError:
    """
    Map an integrity failure to a conflict or a missing-parent error.

    Foreign-key violations become PersistenceReferenceError; unique
    violations and any other integrity failure become PersistenceConflictError.
    """
    code = _sqlstate(error)
    message = str(error.orig).lower()

    if code == FOREIGN_KEY_VIOLATION or "foreign key" in message:
        return PersistenceReferenceError(f"Cannot save {entity}: referenced parent does not exist")
    if code == UNIQUE_VIOLATION or "unique" in message:
        return PersistenceConflictError(f"Cannot save {entity}: it conflicts with an existing one")
    return PersistenceConflictError(f"Cannot save {entity}: integrity constraint violated")


@contextmanager
def translate_persistence_errors(db: Session, entity: str) -> Generator[None, None, None]:
    """
    Roll back and re-raise database failures as persistence errors.

    Usage:
        with self.session_factory() as db, translate_persistence_errors(db, "project"):
            db.add(orm_model)
            db.commit()
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        classified = classify_integrity_error(e, entity)
        logger.warning("persistence_integrity_error", entity=entity, error=classified.message)
        raise classified from e
    except (OperationalError, InterfaceError) as e:
        db.rollback()
        logger.error("persistence_unavailable", entity=entity, error=str(e.orig))
        raise PersistenceUnavailableError(f"Cannot save {entity}: database unavailable") from e
    except DataError as e:
        db.rollback()
        logger.error("persistence_data_rejected", entity=entity, error=str(e.orig))
        raise PersistenceRejectedError(f"Cannot save {entity}: value rejected by database") from e
    except DBAPIError as e:
        db.rollback()
        if e.connection_invalidated:
            logger.error("persistence_connection_invalidated", entity=entity)
            raise PersistenceUnavailableError(f"Cannot save {entity}: connection lost") from e
        logger.error("persistence_database_error", entity=entity, error=str(e.orig))
        raise PersistenceRejectedError(f"Cannot save {entity}: database error") from e
