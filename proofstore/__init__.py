"""
proofstore
==========

Persistence for proofs submitted to the logic-proof tutor: keyed upsert,
user and repository queries, and the admin allow-list they filter by.
"""

from proofstore.db.schemas import Proof, ProofCreate
from proofstore.errors import (
    AdminRefreshError,
    ProofSerializationError,
    ProofStoreError,
    StoreInitError,
    StoreReadError,
    StoreWriteError,
)
from proofstore.store import ProofStore, UserWithEmail
from proofstore.utils.proof_fields import (
    PLACEHOLDER_PROOF_NAME,
    REPOSITORY_PREFIX,
    is_repository_problem_name,
)

__all__ = [
    "ProofStore",
    "UserWithEmail",
    "Proof",
    "ProofCreate",
    "ProofStoreError",
    "StoreInitError",
    "StoreWriteError",
    "ProofSerializationError",
    "StoreReadError",
    "AdminRefreshError",
    "PLACEHOLDER_PROOF_NAME",
    "REPOSITORY_PREFIX",
    "is_repository_problem_name",
]
