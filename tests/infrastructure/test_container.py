from pathlib import Path

import src.infrastructure.container as container
from src.infrastructure.blob_store import FileSystemBlobStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.fees_repository import SqlAlchemyMonthlyFeesRepository
from src.infrastructure.games_repository import SqlAlchemyGamesRepository
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.members_repository import SqlAlchemyMembersRepository
from src.infrastructure.settings import ClubSettings


def test_build_database_adapter_uses_explicit_url():
    adapter = container.build_database_adapter("sqlite://")

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)
    assert adapter._db_url == "sqlite://"


def test_repository_builders_share_the_given_adapter():
    db_port = object()

    builders = {
        container.build_ledger_repository: SqlAlchemyLedgerRepository,
        container.build_fees_repository: SqlAlchemyMonthlyFeesRepository,
        container.build_members_repository: SqlAlchemyMembersRepository,
        container.build_games_repository: SqlAlchemyGamesRepository,
    }

    for builder, expected in builders.items():
        repository = builder(db_port)
        assert isinstance(repository, expected)
        assert repository._db_port is db_port


def test_repository_builder_creates_adapter_when_missing(monkeypatch):
    created = []

    def fake_adapter(db_url=None):
        created.append(db_url)
        return "adapter"

    monkeypatch.setattr(container, "build_database_adapter", fake_adapter)

    repository = container.build_ledger_repository()

    assert created == [None]
    assert repository._db_port == "adapter"


def test_build_blob_store_uses_settings(tmp_path):
    settings = ClubSettings(
        blob_dir=Path(tmp_path),
        blob_base_url="http://club/app/static/blobs",
    )

    store = container.build_blob_store(settings)

    assert isinstance(store, FileSystemBlobStore)
    assert store.upload("x.txt", b"1") == (
        "http://club/app/static/blobs/x.txt"
    )
