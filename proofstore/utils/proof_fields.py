"""
Canonical values for the string-typed proof fields.

The stored columns are plain strings; these constants and enums keep the
literals in one place.
"""

from enum import Enum

ENTRY_TYPE_PROOF = "proof"

PROOF_TYPE_PROPOSITIONAL = "prop"
PROOF_TYPE_FIRST_ORDER = "fol"

COMPLETED_TRUE = "true"
COMPLETED_FALSE = "false"
COMPLETED_ERROR = "error"

REPO_TRUE = "true"
REPO_FALSE = "false"

# Names starting with this prefix were picked from the shared repository
REPOSITORY_PREFIX = "Repository - "

# Placeholder rows written by the client; never listed back to users
PLACEHOLDER_PROOF_NAME = "n/a"


def is_repository_problem_name(proof_name: str) -> bool:
    """Return True if the name carries the repository problem prefix."""
    return bool(proof_name) and proof_name.startswith(REPOSITORY_PREFIX)


class ProofTypeEnum(str, Enum):
    """Logic system a proof is written in (empty for untyped drafts)."""
    prop = PROOF_TYPE_PROPOSITIONAL
    fol = PROOF_TYPE_FIRST_ORDER
    unset = ""


class ProofCompletedEnum(str, Enum):
    true = COMPLETED_TRUE
    false = COMPLETED_FALSE
    error = COMPLETED_ERROR


class RepoProblemEnum(str, Enum):
    true = REPO_TRUE
    false = REPO_FALSE
