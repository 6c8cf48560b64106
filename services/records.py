# coinkard/services/records.py
import logging
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)


class TransactionStatus(str, Enum):
    COMPLETED = "Completed"
    PENDING = "Pending"
    FAILED = "Failed"


def _is_blank(value) -> bool:
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        pass
    return str(value).strip() == ""


def _parse_id(value) -> int:
    """Whole-number ids only; 1.0 from a float column is fine, 1.5 or inf is not."""
    if isinstance(value, str):
        value = value.strip()
        if not value.lstrip("-").isdigit():
            raise ValueError(f"Id is not a whole number: {value!r}")
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Id is not a number: {value!r}")
    if not math.isfinite(number) or not number.is_integer():
        raise ValueError(f"Id is not a whole number: {value!r}")
    return int(number)


@dataclass(frozen=True)
class AssetRecord:
    """One tradeable item in the catalog. Price is in the configured currency unit."""

    id: int
    title: str
    price: float
    image: str
    description: str
    category: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "AssetRecord":
        """
        Builds an asset from a raw table row.
        :param row: A mapping with 'id', 'title', 'price', 'image', 'description' and optionally 'category'.
        :return: The AssetRecord.
        :raises ValueError: If the id is missing or the price is missing or negative.
        """
        if _is_blank(row.get("id")):
            raise ValueError(f"Asset row has no id: {row}")
        if _is_blank(row.get("price")):
            raise ValueError(f"Asset {row['id']} has no price.")
        price = float(row["price"])
        if price < 0:
            raise ValueError(f"Asset {row['id']} has a negative price: {price}")

        category = row.get("category")
        return cls(
            id=_parse_id(row["id"]),
            title="" if _is_blank(row.get("title")) else str(row["title"]),
            price=price,
            image="" if _is_blank(row.get("image")) else str(row["image"]),
            description="" if _is_blank(row.get("description")) else str(row["description"]),
            category=None if _is_blank(category) else str(category),
        )


@dataclass(frozen=True)
class TransactionRecord:
    id: int
    asset: str
    date: date
    status: TransactionStatus

    @classmethod
    def from_row(cls, row: dict) -> "TransactionRecord":
        if _is_blank(row.get("id")):
            raise ValueError(f"Transaction row has no id: {row}")
        try:
            status = TransactionStatus(str(row.get("status")).strip().capitalize())
        except ValueError:
            raise ValueError(f"Transaction {row['id']} has an unknown status: {row.get('status')!r}")
        if _is_blank(row.get("date")):
            raise ValueError(f"Transaction {row['id']} has no date.")
        return cls(
            id=_parse_id(row["id"]),
            asset="" if _is_blank(row.get("asset")) else str(row["asset"]),
            date=pd.Timestamp(row["date"]).date(),
            status=status,
        )
