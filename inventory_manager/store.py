import logging
from typing import Callable, Iterable, Optional

from . import settings
from .schemas import Item, Sale, SaleResult, SaleStatus
from .utils import get_current_timestamp

logger = logging.getLogger(__name__)


class InventoryStore:
    """
    In-memory holder of items, sales and their ID counters.

    IDs come from counters that only move forward, so a deleted item's ID is
    never handed out again. Sales are append-only and keep a snapshot of the
    item name; deleting an item leaves its sales in place.
    """

    def __init__(self, clock: Callable[[], str] = get_current_timestamp):
        self.items: list[Item] = []
        self.sales: list[Sale] = []
        self.next_item_id = 1
        self.next_sale_id = 1
        self.clock = clock

    # --- Core operations ---

    def add(
        self,
        name: str,
        size_or_variant: str,
        quantity: int,
        purchase_price: float,
        selling_price: float,
    ) -> int:
        """Appends a new item and returns its ID. Duplicate names are allowed."""
        item = Item(
            id=self.next_item_id,
            name=name,
            size_or_variant=size_or_variant,
            quantity=quantity,
            purchase_price=purchase_price,
            selling_price=selling_price,
        )
        item_id = item.id
        self.next_item_id += 1
        self.items.append(item)
        logger.debug(f"Added item {item_id} ({name}).")
        return item_id

    def update(
        self, item_id: int, quantity: int, purchase_price: float, selling_price: float
    ) -> bool:
        """
        Overwrites quantity and prices. Name and size are left alone.
        All three values are validated before the item is touched, so a bad
        value raises ValidationError and leaves the stored item as it was.
        """
        for index, item in enumerate(self.items):
            if item.id == item_id:
                self.items[index] = Item.model_validate(
                    {
                        **item.model_dump(),
                        "quantity": quantity,
                        "purchase_price": purchase_price,
                        "selling_price": selling_price,
                    }
                )
                logger.debug(f"Updated item {item_id}.")
                return True
        return False

    def delete(self, item_id: int) -> bool:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                del self.items[index]
                logger.debug(f"Deleted item {item_id}.")
                return True
        return False

    def sell(self, item_id: int, quantity: int) -> SaleResult:
        """
        Sells `quantity` units of an item, recording the sale and its profit.
        Nothing changes unless the result is SUCCESS.
        """
        item = self.get(item_id)
        if item is None:
            return SaleResult(status=SaleStatus.NOT_FOUND)
        if quantity <= 0:
            return SaleResult(status=SaleStatus.INVALID_QUANTITY)
        if quantity > item.quantity:
            return SaleResult(status=SaleStatus.INSUFFICIENT_STOCK)

        profit = (item.selling_price - item.purchase_price) * quantity
        item.quantity -= quantity

        sale = Sale(
            id=self.next_sale_id,
            item_id=item.id,
            item_name=item.name,
            quantity_sold=quantity,
            profit=profit,
            date_sold=self.clock(),
        )
        self.next_sale_id += 1
        self.sales.append(sale)
        logger.debug(f"Sale {sale.id}: {quantity} x item {item.id}, profit {profit}.")
        return SaleResult(status=SaleStatus.SUCCESS, profit=profit, sale=sale)

    # --- Queries ---

    def get(self, item_id: int) -> Optional[Item]:
        return next((item for item in self.items if item.id == item_id), None)

    def search(self, term: str) -> list[Item]:
        """Case-insensitive substring match on item names."""
        needle = term.strip().lower()
        if not needle:
            return []
        return [item for item in self.items if needle in item.name.lower()]

    def low_stock(self, threshold: Optional[int] = None) -> list[Item]:
        if threshold is None:
            threshold = settings.LOW_STOCK_THRESHOLD
        return [item for item in self.items if item.quantity <= threshold]

    def sales_history(self) -> list[Sale]:
        """Sales, newest first."""
        return list(reversed(self.sales))

    def status(self) -> dict[str, int]:
        return {
            "items": len(self.items),
            "sales": len(self.sales),
            "next_item_id": self.next_item_id,
            "next_sale_id": self.next_sale_id,
        }

    # --- State management (used by persistence) ---

    def clear(self):
        self.items = []
        self.sales = []
        self.next_item_id = 1
        self.next_sale_id = 1

    def restore(self, items: Iterable[Item], sales: Iterable[Sale]):
        """
        Installs loaded records. Each counter resumes one past the highest ID
        seen, and never moves backwards.
        """
        for item in items:
            self.items.append(item)
            self.next_item_id = max(self.next_item_id, item.id + 1)
        for sale in sales:
            self.sales.append(sale)
            self.next_sale_id = max(self.next_sale_id, sale.id + 1)

    def seed(self) -> list[int]:
        """Adds the default sample items and returns their IDs."""
        return [self.add(**fields) for fields in settings.SEED_ITEMS]

    def is_empty(self) -> bool:
        return not self.items and not self.sales
