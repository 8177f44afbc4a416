import logging
from pathlib import Path
from typing import Callable, Optional

from . import data_handler, reports, utils
from .schemas import SaleStatus
from .store import InventoryStore

logger = logging.getLogger(__name__)

MENU = """
===== INVENTORY MANAGER (Local Storage) =====
1. Add Item
2. Update Item
3. Delete Item
4. Search Item
5. Low Stock Alert
6. Sell Item
7. Sales History
8. List All Items
9. Check System Status
10. Export Reports
11. Save & Exit"""

SALE_MESSAGES = {
    SaleStatus.NOT_FOUND: "Item not found!",
    SaleStatus.INSUFFICIENT_STOCK: "Not enough stock!",
    SaleStatus.INVALID_QUANTITY: "Quantity sold must be at least 1.",
}


class InventoryMenu:
    """
    Text menu over an InventoryStore. Every prompt accepts 'cancel' or 'c'
    to return to the menu. Input and output are injectable for testing.
    """

    def __init__(
        self,
        store: InventoryStore,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        items_path: Optional[Path] = None,
        sales_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
    ):
        self.store = store
        self.input = input_func
        self.output = output_func
        self.items_path = items_path
        self.sales_path = sales_path
        self.output_dir = output_dir

        self.actions = {
            1: self.add_item,
            2: self.update_item,
            3: self.delete_item,
            4: self.search_items,
            5: self.low_stock,
            6: self.sell_item,
            7: self.sales_history,
            8: self.list_items,
            9: self.system_status,
            10: self.export_reports,
        }

    # --- Prompt helpers ---

    def _ask(self, message: str) -> Optional[str]:
        """Returns the raw answer, or None when the user cancels or input ends."""
        try:
            answer = self.input(f"{message} (or type 'cancel' to return): ")
        except EOFError:
            return None
        if utils.is_cancel(answer):
            return None
        return answer

    def _ask_int(self, message: str) -> Optional[int]:
        answer = self._ask(message)
        return None if answer is None else utils.parse_int(answer)

    def _ask_float(self, message: str) -> Optional[float]:
        answer = self._ask(message)
        return None if answer is None else utils.parse_float(answer)

    # --- Loop ---

    def run(self):
        while True:
            self.output(MENU)
            try:
                choice = utils.parse_int(self.input("Choice: "))
            except EOFError:
                choice = 11

            if choice == 11:
                self.save()
                return
            action = self.actions.get(choice)
            if action is None:
                self.output("Invalid choice.")
                continue
            action()

    # --- Actions ---

    def add_item(self):
        name = self._ask("Item name")
        if name is None or not name.strip():
            self.output("Cancelled.")
            return
        size = self._ask("Size/Color")
        if size is None:
            self.output("Cancelled.")
            return
        quantity = self._ask_int("Quantity")
        if quantity is None:
            self.output("Cancelled or invalid quantity.")
            return
        buy = self._ask_float("Purchase price")
        if buy is None:
            self.output("Cancelled or invalid purchase price.")
            return
        sell = self._ask_float("Selling price")
        if sell is None:
            self.output("Cancelled or invalid selling price.")
            return

        item_id = self.store.add(name, size, quantity, buy, sell)
        self.output(f"Item added successfully! Assigned ID: {item_id}")

    def update_item(self):
        item_id = self._ask_int("Item ID")
        if item_id is None:
            self.output("Cancelled or invalid ID.")
            return
        quantity = self._ask_int("New quantity")
        if quantity is None:
            self.output("Cancelled or invalid quantity.")
            return
        buy = self._ask_float("New purchase price")
        if buy is None:
            self.output("Cancelled or invalid purchase price.")
            return
        sell = self._ask_float("New selling price")
        if sell is None:
            self.output("Cancelled or invalid selling price.")
            return

        if self.store.update(item_id, quantity, buy, sell):
            self.output("Item updated!")
        else:
            self.output("Item not found.")

    def delete_item(self):
        item_id = self._ask_int("Item ID to DELETE")
        if item_id is None:
            self.output("Cancelled or invalid ID.")
            return

        item = self.store.get(item_id)
        if item is None:
            self.output("Item not found.")
            return

        self.output(f"Deleting Item: {item.name} (Qty: {item.quantity})")
        try:
            confirm = self.input("Are you sure? (y/n): ")
        except EOFError:
            confirm = ""
        if confirm.strip().lower() != "y":
            self.output("Deletion cancelled.")
            return

        if self.store.delete(item_id):
            self.output("Item deleted successfully.")
        else:
            self.output("Error deleting item.")

    def search_items(self):
        term = self._ask("Search name")
        if term is None or not term.strip():
            self.output("Cancelled.")
            return
        self.output("\n--- SEARCH RESULTS ---")
        self.output(reports.render(reports.search_frame(self.store, term), "No matches found."))

    def low_stock(self):
        self.output("\n--- LOW STOCK ITEMS ---")
        self.output(reports.render(reports.low_stock_frame(self.store), "No low stock items."))

    def sell_item(self):
        item_id = self._ask_int("Item ID")
        if item_id is None:
            self.output("Cancelled or invalid ID.")
            return
        quantity = self._ask_int("Quantity sold")
        if quantity is None:
            self.output("Cancelled or invalid quantity.")
            return

        result = self.store.sell(item_id, quantity)
        if result.ok:
            self.output(f"Item sold! Profit: {result.profit}")
        else:
            self.output(SALE_MESSAGES[result.status])

    def sales_history(self):
        self.output("\n--- SALES HISTORY ---")
        self.output(reports.render(reports.sales_history_frame(self.store), "No sales recorded yet."))
        if self.store.sales:
            self.output("\n--- PROFIT BY ITEM ---")
            self.output(reports.render(reports.profit_summary(self.store.sales), ""))

    def list_items(self):
        self.output("\n--- ITEM LIST ---")
        self.output(reports.render(reports.items_frame(self.store.items), "No items in inventory."))

    def system_status(self):
        status = self.store.status()
        self.output("\nChecking database connection...")
        self.output(" [OK] Application memory initialized.")
        self.output(f" [OK] Item storage active ({status['items']} items).")
        self.output(f" [OK] Sales storage active ({status['sales']} records).")
        self.output("Database connection is HEALTHY (Local Mode).")

    def export_reports(self):
        try:
            written = data_handler.export_reports(self.store, self.output_dir)
        except OSError as e:
            logger.error(f"❌ Could not export reports. Reason: {e}")
            self.output("Report export failed.")
            return
        for path in written.values():
            self.output(f"Exported: {path}")

    def save(self):
        report = data_handler.save_store(self.store, self.items_path, self.sales_path)
        if not report.ok:
            for error in report.errors:
                self.output(f"[Error] {error}")


def run(
    items_path: Optional[Path] = None,
    sales_path: Optional[Path] = None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> InventoryStore:
    """Loads persisted data, runs the menu until the user saves and exits."""
    store = InventoryStore()
    load_report = data_handler.load_store(store, items_path, sales_path)
    if not load_report.ok:
        output_func(
            f"[Warning] {len(load_report.skipped)} row(s) skipped, "
            f"{len(load_report.errors)} file error(s) while loading. See the log for details."
        )

    InventoryMenu(
        store,
        input_func=input_func,
        output_func=output_func,
        items_path=items_path,
        sales_path=sales_path,
    ).run()
    return store
