"""Unit tests for the YAML sample-data connector."""
from __future__ import annotations

from pathlib import Path

import pytest

from connectors.static_catalog_connector import StaticCatalogConnector


class TestStaticCatalogConnector:
    def test_requires_path(self) -> None:
        with pytest.raises(ValueError):
            StaticCatalogConnector(data_path="")

    def test_list_tables(self, sample_data_path: Path) -> None:
        connector = StaticCatalogConnector(sample_data_path)
        assert connector.list_tables() == ["assets", "transactions", "empty_table"]

    def test_reads_table_in_source_order(self, sample_data_path: Path) -> None:
        df = StaticCatalogConnector(sample_data_path).get_table_as_dataframe("assets")
        assert list(df["title"]) == ["CryptoPunk #1234", "Broken price", "Fidenza #313", "Duplicate punk"]

    def test_unknown_or_empty_table_is_empty_frame(self, sample_data_path: Path) -> None:
        connector = StaticCatalogConnector(sample_data_path)
        assert connector.get_table_as_dataframe("nope").empty
        assert connector.get_table_as_dataframe("empty_table").empty

    def test_missing_file_is_empty_frame(self, tmp_path: Path) -> None:
        connector = StaticCatalogConnector(tmp_path / "missing.yaml")
        assert connector.get_table_as_dataframe("assets").empty
        assert connector.list_tables() == []

    def test_non_mapping_document_is_empty_frame(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        assert StaticCatalogConnector(path).get_table_as_dataframe("assets").empty

    def test_table_that_is_not_rows_is_empty_frame(self, tmp_path: Path) -> None:
        path = tmp_path / "scalar.yaml"
        path.write_text("assets: 3\n", encoding="utf-8")
        assert StaticCatalogConnector(path).get_table_as_dataframe("assets").empty
