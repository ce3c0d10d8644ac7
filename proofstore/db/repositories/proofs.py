"""
Proof repository functions.

Implements the keyed upsert, the filtered list queries and the full wipe.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from proofstore.db import models, schemas
from proofstore.db.repositories import admins as admin_repo
from proofstore.db.types import encode_string_list
from proofstore.utils.proof_fields import COMPLETED_TRUE, PLACEHOLDER_PROOF_NAME, REPO_TRUE

logger = logging.getLogger(__name__)

# Dialects with a native INSERT ... ON CONFLICT DO UPDATE
_NATIVE_UPSERT = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

_KEY_COLUMNS = ("user_submitted", "proof_name")
_ARRAY_COLUMNS = ("premise", "logic", "rules")


def _row_values(proof: schemas.ProofCreate) -> Dict[str, Any]:
    values = {
        "entry_type": proof.entry_type,
        "user_submitted": proof.user_submitted,
        "proof_name": proof.proof_name,
        "proof_type": proof.proof_type,
        "premise": proof.premise,
        "logic": proof.logic,
        "rules": proof.rules,
        "proof_completed": proof.proof_completed,
        "conclusion": proof.conclusion,
        "repo_problem": proof.repo_problem,
        "time_submitted": models.now_utc(),
    }
    # Fail before touching the database if an array will not encode
    for column in _ARRAY_COLUMNS:
        encode_string_list(values[column])
    return values


def _column(attribute: str):
    # Table columns are keyed by their camelCase names; the mapper by attribute
    return models.Proof.__mapper__.columns[attribute]


def _native_upsert(db: Session, insert_fn, values: Dict[str, Any]) -> None:
    stmt = insert_fn(models.Proof.__table__).values({_column(key): value for key, value in values.items()})
    stmt = stmt.on_conflict_do_update(
        index_elements=[_column(key) for key in _KEY_COLUMNS],
        set_={_column(key): value for key, value in values.items() if key not in _KEY_COLUMNS},
    )
    db.execute(stmt)


def _find_locked(db: Session, values: Dict[str, Any]):
    return (
        db.query(models.Proof)
        .filter(
            models.Proof.user_submitted == values["user_submitted"],
            models.Proof.proof_name == values["proof_name"],
        )
        .with_for_update()
        .first()
    )


def _locking_upsert(db: Session, values: Dict[str, Any]) -> None:
    existing = _find_locked(db, values)
    if existing is None:
        db.add(models.Proof(**values))
        return
    for key, value in values.items():
        if key not in _KEY_COLUMNS:
            setattr(existing, key, value)


def upsert_proof(db: Session, proof: schemas.ProofCreate) -> None:
    """Insert ``proof`` or overwrite the row sharing its (user, name) key.

    The write is a single transaction; on failure it is rolled back and the
    error re-raised.
    """
    values = _row_values(proof)
    insert_fn = _NATIVE_UPSERT.get(db.get_bind().dialect.name)
    try:
        if insert_fn is not None:
            _native_upsert(db, insert_fn, values)
        else:
            _locking_upsert(db, values)
        db.commit()
    except IntegrityError:
        db.rollback()
        if insert_fn is not None:
            raise
        # A concurrent writer inserted the key after our lookup; it exists now,
        # so the second attempt takes the update path.
        logger.debug("Retrying upsert of %r as update", proof.proof_name)
        try:
            _locking_upsert(db, values)
            db.commit()
        except Exception:
            db.rollback()
            raise
    except Exception:
        db.rollback()
        raise
    logger.debug("Stored proof %r for %r", proof.proof_name, proof.user_submitted)


def get_user_proofs(db: Session, user_email: str) -> List[models.Proof]:
    return (
        db.query(models.Proof)
        .filter(
            models.Proof.user_submitted == user_email,
            models.Proof.proof_completed != COMPLETED_TRUE,
            models.Proof.proof_name != PLACEHOLDER_PROOF_NAME,
        )
        .all()
    )


def get_user_completed_proofs(db: Session, user_email: str) -> List[models.Proof]:
    return (
        db.query(models.Proof)
        .filter(
            models.Proof.user_submitted == user_email,
            models.Proof.proof_completed == COMPLETED_TRUE,
        )
        .all()
    )


def get_repo_proofs(db: Session) -> List[models.Proof]:
    return (
        db.query(models.Proof)
        .filter(
            models.Proof.repo_problem == REPO_TRUE,
            models.Proof.user_submitted.in_(admin_repo.admin_emails()),
        )
        .order_by(models.Proof.user_submitted.asc(), models.Proof.id.asc())
        .all()
    )


def get_attempted_repo_proofs(db: Session) -> List[models.Proof]:
    """Every proof whose premise and conclusion equal those of an admin's proof.

    Equality is on the stored JSON text and the raw conclusion string, so any
    difference in spacing or formula spelling is a different problem.
    """
    problems = admin_repo.admin_problems()
    return (
        db.query(models.Proof)
        .join(
            problems,
            and_(
                models.Proof.premise == problems.c.premise,
                models.Proof.conclusion == problems.c.conclusion,
            ),
        )
        .order_by(models.Proof.id.asc())
        .all()
    )


def delete_all_proofs(db: Session) -> int:
    try:
        deleted = db.query(models.Proof).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return deleted
