# coinkard/services/actions.py
import logging

from services.records import AssetRecord

logger = logging.getLogger(__name__)


def request_trade(asset: AssetRecord) -> None:
    """Trade button handler. Trading is not wired to any exchange, so this only records the request."""
    logger.info(f"Trade requested for asset {asset.id} ({asset.title}) at {asset.price}; trading is not available.")
