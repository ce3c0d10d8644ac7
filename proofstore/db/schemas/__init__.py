"""
Pydantic schemas for proof input and output.

Field names are snake_case in Python and camelCase on the wire
(``model_dump(by_alias=True)``).
"""

from .proofs import ProofBase, ProofCreate, Proof

__all__ = [
    "ProofBase",
    "ProofCreate",
    "Proof",
]
