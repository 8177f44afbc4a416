from typing import Optional

import pandas as pd

from . import settings
from .schemas import Item, Sale
from .store import InventoryStore


def items_frame(items: list[Item]) -> pd.DataFrame:
    """Items as a DataFrame in persisted column order. Empty input keeps the columns."""
    return pd.DataFrame(
        [item.model_dump() for item in items], columns=settings.ITEM_COLUMNS
    )


def sales_frame(sales: list[Sale]) -> pd.DataFrame:
    return pd.DataFrame(
        [sale.model_dump() for sale in sales], columns=settings.SALE_COLUMNS
    )


def search_frame(store: InventoryStore, term: str) -> pd.DataFrame:
    return items_frame(store.search(term))


def low_stock_frame(store: InventoryStore, threshold: Optional[int] = None) -> pd.DataFrame:
    """Low stock items, lowest quantity first."""
    df = items_frame(store.low_stock(threshold))
    return df.sort_values(["quantity", "id"]).reset_index(drop=True)


def sales_history_frame(store: InventoryStore) -> pd.DataFrame:
    return sales_frame(store.sales_history())


def profit_summary(sales: list[Sale]) -> pd.DataFrame:
    """
    Units sold and profit per item, best earners first.
    Grouped on item_id and the name snapshot, so sales of deleted items still appear.
    """
    df = sales_frame(sales)
    if df.empty:
        return pd.DataFrame(columns=["item_id", "item_name", "units_sold", "total_profit"])

    summary = (
        df.groupby(["item_id", "item_name"])
        .agg(units_sold=("quantity_sold", "sum"), total_profit=("profit", "sum"))
        .reset_index()
        .sort_values(["total_profit", "item_id"], ascending=[False, True])
        .reset_index(drop=True)
    )
    summary["total_profit"] = summary["total_profit"].round(2)
    return summary


def render(df: pd.DataFrame, empty_message: str) -> str:
    if df.empty:
        return empty_message
    return df.to_string(index=False)
