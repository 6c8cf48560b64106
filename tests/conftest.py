"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from services.records import AssetRecord

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture()
def two_asset_catalog() -> tuple[AssetRecord, ...]:
    return (
        AssetRecord(id=1, title="Asset #1", price=1.0, image="", description="First", category="Art"),
        AssetRecord(id=2, title="Asset #2", price=2.0, image="", description="Second", category="Collectibles"),
    )


@pytest.fixture()
def nft_catalog() -> tuple[AssetRecord, ...]:
    return (
        AssetRecord(id=1, title="CryptoPunk #1234", price=2.5, image="", description="", category="Collectibles"),
        AssetRecord(id=2, title="Bored Ape #5678", price=3.8, image="", description="", category="Collectibles"),
        AssetRecord(id=3, title="Fidenza #313", price=9.75, image="", description="", category="Art"),
        AssetRecord(id=4, title="Bored Ape Kennel", price=0.4, image="", description="", category=None),
        AssetRecord(id=5, title="  spaced  out", price=0.0, image="", description="", category="Art"),
    )


@pytest.fixture()
def sample_data_path(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        assets:
          - id: 1
            title: "CryptoPunk #1234"
            price: 2.5
            image: "https://example.com/punk.png"
            description: "Rare alien punk."
            category: "Collectibles"
          - id: 2
            title: "Broken price"
            price: -1
            image: ""
            description: ""
          - id: 3
            title: "Fidenza #313"
            price: 9.75
            image: "https://example.com/fidenza.png"
            description: "Flow field."
          - id: 1
            title: "Duplicate punk"
            price: 1.0
            image: ""
            description: ""
        transactions:
          - id: 101
            asset: "CryptoPunk #1234"
            date: 2024-05-02
            status: "Completed"
          - id: 102
            asset: "Fidenza #313"
            date: 2024-05-09
            status: "Lost"
        empty_table: []
    """)
    path = tmp_path / "sample_data.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def settings_path(tmp_path: Path, sample_data_path: Path) -> Path:
    content = textwrap.dedent(f"""\
        app:
          title: "Test Store"
          currency: "ETH"
          default_theme: "dark"
        data:
          source_path: "{sample_data_path.as_posix()}"
          assets_table: "assets"
          transactions_table: "transactions"
        logging:
          level: "WARNING"
    """)
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path
