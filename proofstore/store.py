"""
Proof store facade.

``ProofStore`` owns the engine and session factory and exposes the operations
the rest of the application uses: keyed upsert, the four filtered reads, the
admin allow-list refresh, the full wipe and close.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Optional, Protocol, Union, runtime_checkable

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from proofstore.config import get_settings
from proofstore.db import database, schemas
from proofstore.db.repositories import admins as admin_repo
from proofstore.db.repositories import proofs as proof_repo
from proofstore.errors import (
    AdminRefreshError,
    ProofSerializationError,
    ProofStoreError,
    StoreReadError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class UserWithEmail(Protocol):
    """Anything that can report the identity of its submitter."""

    def get_email(self) -> str: ...


UserLike = Union[str, UserWithEmail]
ProofLike = Union[schemas.ProofBase, Mapping[str, Any]]
AdminSet = Union[Mapping[str, Any], Iterable[str]]


def _identity(user: UserLike) -> str:
    if isinstance(user, str):
        return user
    if isinstance(user, UserWithEmail):
        return user.get_email()
    raise TypeError(f"Expected an identity string or an object with get_email(), got {type(user).__name__}")


def _coerce_proof(proof: ProofLike) -> schemas.ProofCreate:
    if isinstance(proof, schemas.ProofCreate):
        return proof
    try:
        if isinstance(proof, schemas.ProofBase):
            return schemas.ProofCreate.model_validate(proof.model_dump())
        return schemas.ProofCreate.model_validate(dict(proof))
    except ValidationError as exc:
        raise ProofSerializationError(f"Invalid proof payload: {exc}") from exc


def _admin_identities(admin_set: AdminSet) -> List[str]:
    if isinstance(admin_set, str):
        raise TypeError("Admin set must be a collection of identities, not a single string")
    if isinstance(admin_set, Mapping):
        # Mapping keys are the identities; values only mark membership
        return list(admin_set.keys())
    return list(admin_set)


class ProofStore:
    """Relational store for submitted proofs.

    Safe to share between threads: every call runs in its own session and
    relies on the database's transactions and unique index for isolation.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        *,
        engine: Optional[Engine] = None,
        create_schema: bool = True,
        echo: Optional[bool] = None,
    ):
        if engine is None:
            url = database_url or get_settings().database_url
            engine = database.create_db_engine(url, echo=echo)
        self._engine = engine
        if create_schema:
            database.create_schema(engine)
        self._sessions = database.create_session_factory(engine)
        self._closed = False
        logger.info("Proof store opened on %s", engine.url.render_as_string(hide_password=True))

    @classmethod
    def from_env(cls) -> "ProofStore":
        """Build a store from environment settings and seed configured admins."""
        settings = get_settings()
        store = cls(settings.database_url, echo=settings.sql_echo)
        if settings.admins:
            store.update_admins(settings.admins)
        return store

    @property
    def engine(self) -> Engine:
        return self._engine

    def __enter__(self) -> "ProofStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _read(self, operation: str, query: Callable[[Session], List[Any]]) -> List[schemas.Proof]:
        try:
            with self._sessions() as db:
                rows = query(db)
                results = [schemas.Proof.model_validate(row) for row in rows]
        except ProofStoreError:
            raise
        except (SQLAlchemyError, ValidationError, ValueError) as exc:
            logger.error("%s failed: %s", operation, exc)
            raise StoreReadError(f"{operation} failed: {exc}") from exc
        logger.debug("%s returned %d proofs", operation, len(results))
        return results

    def store(self, proof: ProofLike) -> None:
        """Insert ``proof`` or replace the stored one with the same user and name."""
        payload = _coerce_proof(proof)
        try:
            with self._sessions() as db:
                proof_repo.upsert_proof(db, payload)
        except ProofStoreError:
            raise
        except SQLAlchemyError as exc:
            logger.error("Storing proof %r for %r failed: %s", payload.proof_name, payload.user_submitted, exc)
            raise StoreWriteError(f"Failed to store proof {payload.proof_name!r}: {exc}") from exc

    def get_user_proofs(self, user: UserLike) -> List[schemas.Proof]:
        """Unfinished proofs of ``user``, excluding placeholder rows."""
        email = _identity(user)
        return self._read("get_user_proofs", lambda db: proof_repo.get_user_proofs(db, email))

    def get_user_completed_proofs(self, user: UserLike) -> List[schemas.Proof]:
        email = _identity(user)
        return self._read(
            "get_user_completed_proofs", lambda db: proof_repo.get_user_completed_proofs(db, email)
        )

    def get_repo_proofs(self) -> List[schemas.Proof]:
        """Repository problems published by current admins, ordered by submitter."""
        return self._read("get_repo_proofs", proof_repo.get_repo_proofs)

    def get_all_attempted_repo_proofs(self) -> List[schemas.Proof]:
        """Every proof sharing premise and conclusion with an admin's proof.

        The admin's own rows match themselves and are included.
        """
        return self._read("get_all_attempted_repo_proofs", proof_repo.get_attempted_repo_proofs)

    def update_admins(self, admin_set: AdminSet) -> None:
        """Replace the admin allow-list with exactly ``admin_set``.

        Accepts a mapping keyed by identity (every key is an admin, whatever
        its value) or an iterable of identities. A failure leaves the previous
        list in place and raises ``AdminRefreshError``, which callers must not
        swallow.
        """
        emails = _admin_identities(admin_set)
        try:
            with self._sessions() as db:
                count = admin_repo.replace_admins(db, emails)
        except SQLAlchemyError as exc:
            logger.critical("Admin allow-list rebuild failed: %s", exc)
            raise AdminRefreshError(f"Admin allow-list rebuild failed: {exc}") from exc
        logger.info("Admin allow-list refreshed with %d identities", count)

    def list_admins(self) -> List[str]:
        try:
            with self._sessions() as db:
                return admin_repo.list_admins(db)
        except SQLAlchemyError as exc:
            raise StoreReadError(f"list_admins failed: {exc}") from exc

    def empty(self) -> None:
        """Delete every stored proof. The admin allow-list is kept."""
        try:
            with self._sessions() as db:
                deleted = proof_repo.delete_all_proofs(db)
        except SQLAlchemyError as exc:
            logger.error("Emptying proof store failed: %s", exc)
            raise StoreWriteError(f"Failed to empty proof store: {exc}") from exc
        logger.info("Proof store emptied (%d rows removed)", deleted)

    def close(self) -> None:
        if self._closed:
            return
        self._engine.dispose()
        self._closed = True
        logger.info("Proof store closed")
