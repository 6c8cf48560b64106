# coinkard/utils/data_loader.py
import logging
import streamlit as st
import pandas as pd
from datetime import datetime
from connectors.static_catalog_connector import StaticCatalogConnector
from services.filter_engine import ALL_CATEGORIES
from services.records import AssetRecord, TransactionRecord
from utils.config_loader import APP_CONFIG

logger = logging.getLogger(__name__)


def records_from_dataframe(df, record_cls):
    """
    Converts table rows into records, keeping source order.
    Rows that fail validation or repeat an earlier id are logged and skipped.
    """
    records = []
    seen_ids = set()
    for row in df.to_dict(orient="records"):
        try:
            record = record_cls.from_row(row)
        except (ValueError, TypeError) as e:
            logger.error(f"Skipping invalid {record_cls.__name__} row: {e}")
            continue
        if record.id in seen_ids:
            logger.error(f"Skipping {record_cls.__name__} with duplicate id {record.id}.")
            continue
        seen_ids.add(record.id)
        records.append(record)
    return tuple(records)


def _load_table(table_key, record_cls):
    if "error" in APP_CONFIG:
        st.error(f"Configuration Error: {APP_CONFIG['error']}")
        return (), None

    data_config = APP_CONFIG.get('data', {})
    table_name = data_config.get(table_key)
    if not table_name:
        st.error(f"Data configuration is incomplete. Ensure '{table_key}' is set in settings.yaml.")
        return (), None

    connector = StaticCatalogConnector(data_path=data_config['source_path'])
    if table_name not in connector.list_tables():
        st.error(f"Sample table '{table_name}' was not found in {data_config['source_path']}.")
        return (), None

    df = connector.get_table_as_dataframe(table_name)
    timestamp = datetime.now()

    if df.empty:
        st.warning(f"Sample table '{table_name}' is empty.")
        return (), timestamp

    records = records_from_dataframe(df, record_cls)
    logger.info(f"Loaded {len(records)} {record_cls.__name__} entries from '{table_name}'.")
    return records, timestamp


@st.cache_data
def load_catalog():
    """Returns the catalog as a tuple of AssetRecord in source order, and when it was loaded."""
    return _load_table('assets_table', AssetRecord)


@st.cache_data
def load_transactions():
    return _load_table('transactions_table', TransactionRecord)


def category_options(catalog):
    """'all' followed by each distinct category in the order it first appears in the catalog."""
    options = [ALL_CATEGORIES]
    for asset in catalog:
        if asset.category and asset.category not in options:
            options.append(asset.category)
    return options


def transactions_to_dataframe(transactions):
    return pd.DataFrame(
        [
            {"ID": t.id, "Asset": t.asset, "Date": t.date, "Status": t.status.value}
            for t in transactions
        ],
        columns=["ID", "Asset", "Date", "Status"],
    )
