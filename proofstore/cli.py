"""Maintenance commands for the proof store database."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from proofstore.config import database_url, get_settings
from proofstore.db import schemas
from proofstore.errors import ProofStoreError
from proofstore.store import ProofStore

logger = logging.getLogger("proofstore.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="proofstore", description="Inspect and maintain the proof store")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL (default: PROOFSTORE_DATABASE_URL or a local SQLite file)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("init-db", help="Create the proofs and admins tables if missing")
    sub.add_parser("empty", help="Delete every stored proof (admins are kept)")
    sub.add_parser("list-repo", help="Print repository problems published by current admins")
    sub.add_parser("list-attempts", help="Print every proof matching an admin problem")
    return parser.parse_args(argv)


def _print_proofs(proofs: List[schemas.Proof]) -> None:
    for proof in proofs:
        print(json.dumps(proof.model_dump(by_alias=True, mode="json"), ensure_ascii=False))


def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    with ProofStore(database_url(args.database_url)) as store:
        if settings.admins:
            store.update_admins(settings.admins)
        if args.command == "init-db":
            print("Schema ready.")
        elif args.command == "empty":
            store.empty()
            print("All proofs deleted.")
        elif args.command == "list-repo":
            _print_proofs(store.get_repo_proofs())
        elif args.command == "list-attempts":
            _print_proofs(store.get_all_attempted_repo_proofs())
    return 0


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=get_settings().log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    args = parse_args(argv)
    try:
        return run(args)
    except ProofStoreError as exc:
        logger.error("Command %s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
