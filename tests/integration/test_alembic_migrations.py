from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from proofstore import ProofStore
from tests.helpers import make_proof


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the project migrations."""
    project_root = Path(__file__).resolve().parents[2]
    cfg = Config(str(project_root / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(project_root / "migrations"))
    cfg.attributes["use_config_url"] = True
    cfg.attributes["configure_logger"] = False
    return cfg


@pytest.mark.integration
def test_alembic_upgrade_and_downgrade_cycle(tmp_path) -> None:
    """Migrations upgrade from base to head and cleanly downgrade back."""
    url = f"sqlite+pysqlite:///{tmp_path / 'migrated.db'}"
    cfg = _make_alembic_config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        assert {"proofs", "admins"} <= set(inspector.get_table_names())
        indexes = {ix["name"]: ix for ix in inspector.get_indexes("proofs")}
        assert indexes["idx_user_proof"]["unique"]
        assert indexes["idx_user_proof"]["column_names"] == ["userSubmitted", "proofName"]

        command.downgrade(cfg, "base")
        assert "proofs" not in inspect(engine).get_table_names()
        command.upgrade(cfg, "head")
    finally:
        engine.dispose()


@pytest.mark.integration
def test_store_runs_on_migrated_schema(tmp_path) -> None:
    url = f"sqlite+pysqlite:///{tmp_path / 'migrated.db'}"
    command.upgrade(_make_alembic_config(url), "head")

    with ProofStore(url, create_schema=False) as store:
        store.update_admins(["admin@x.com"])
        store.store(make_proof(userSubmitted="admin@x.com", repoProblem="true"))
        store.store(make_proof(userSubmitted="admin@x.com", repoProblem="true", conclusion="C"))
        repo = store.get_repo_proofs()
        assert len(repo) == 1
        assert repo[0].conclusion == "C"
