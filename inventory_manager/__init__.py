from .schemas import Item, Sale, SaleResult, SaleStatus
from .store import InventoryStore

__all__ = ["InventoryStore", "Item", "Sale", "SaleResult", "SaleStatus"]
