def make_proof(**overrides):
    """Return a camelCase proof payload with sensible defaults."""
    payload = {
        "entryType": "proof",
        "userSubmitted": "student@example.edu",
        "proofName": "Test Proof 1",
        "proofType": "prop",
        "premise": ["A", "A -> B"],
        "logic": [],
        "rules": [],
        "proofCompleted": "false",
        "conclusion": "B",
        "repoProblem": "false",
    }
    payload.update(overrides)
    return payload


def proof_fields(proof):
    """Wire form of a stored proof without the store-assigned fields."""
    data = proof.model_dump(by_alias=True)
    data.pop("id")
    data.pop("timeSubmitted")
    return data
