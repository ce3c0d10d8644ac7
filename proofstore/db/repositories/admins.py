"""
Admin allow-list repository functions.

The allow-list is replaced wholesale; the derived selects here are what the
admin-scoped proof queries filter and join against.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from proofstore.db import models

logger = logging.getLogger(__name__)


def replace_admins(db: Session, emails: Iterable[str]) -> int:
    """Swap the allow-list for ``emails`` inside the caller's transaction.

    Delete and insert are committed together so concurrent readers see either
    the previous list or the new one.
    """
    wanted = sorted({email for email in emails})
    try:
        db.query(models.Admin).delete(synchronize_session=False)
        db.add_all([models.Admin(email=email) for email in wanted])
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.debug("Admin allow-list now holds %d identities", len(wanted))
    return len(wanted)


def list_admins(db: Session) -> List[str]:
    return [email for (email,) in db.query(models.Admin.email).order_by(models.Admin.email).all()]


def admin_emails():
    """Select of every identity currently on the allow-list."""
    return select(models.Admin.email)


def admin_problems():
    """Distinct (premise, conclusion) pairs of proofs submitted by admins."""
    return (
        select(models.Proof.premise, models.Proof.conclusion)
        .where(models.Proof.user_submitted.in_(admin_emails()))
        .distinct()
        .subquery("admin_problems")
    )
