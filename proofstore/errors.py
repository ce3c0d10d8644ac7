"""Exceptions raised by the proof store.

Every failure surfaces as a ``ProofStoreError`` subclass with the underlying
SQLAlchemy or JSON error chained as ``__cause__``.
"""


class ProofStoreError(RuntimeError):
    """Base class for all proof store failures."""


class StoreInitError(ProofStoreError):
    """Engine or schema could not be set up; the store is unusable."""


class StoreWriteError(ProofStoreError):
    """A write transaction could not be started, executed or committed."""


class ProofSerializationError(StoreWriteError):
    """An array field (premise, logic, rules) could not be encoded."""


class StoreReadError(ProofStoreError):
    """A query failed or a stored payload could not be decoded."""


class AdminRefreshError(ProofStoreError):
    """The admin allow-list could not be rebuilt.

    Treat as unrecoverable: every admin-scoped query depends on the list.
    """
