# coinkard/connectors/static_catalog_connector.py
import yaml
import pandas as pd
import logging

logger = logging.getLogger(__name__)

class StaticCatalogConnector:
    """Reads the bundled sample data: a YAML document whose top-level keys are tables of row mappings."""

    def __init__(self, data_path):
        if not data_path:
            logger.error("Sample data path is not provided.")
            raise ValueError("Sample data path is required.")
        self.data_path = str(data_path)

    def _load_document(self):
        with open(self.data_path, 'r', encoding='utf-8') as f:
            document = yaml.safe_load(f) or {}
        if not isinstance(document, dict):
            raise ValueError(f"Expected a mapping of tables in {self.data_path}, got {type(document).__name__}.")
        return document

    def list_tables(self):
        try:
            return list(self._load_document().keys())
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.error(f"Failed to list tables in {self.data_path}: {e}")
            return []

    def get_table_as_dataframe(self, table_name):
        logger.info(f"Loading sample table '{table_name}' from {self.data_path}")
        try:
            rows = self._load_document().get(table_name)
            if not rows:
                logger.warning(f"No data found in sample table '{table_name}'.")
                return pd.DataFrame()
            if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
                logger.error(f"Sample table '{table_name}' must be a list of rows.")
                return pd.DataFrame()

            df = pd.DataFrame(rows)
            logger.info(f"Successfully loaded {len(df)} rows from sample table '{table_name}'.")
            return df
        except Exception as e:
            logger.error(f"Failed to get data for sample table '{table_name}': {e}")
            return pd.DataFrame()
