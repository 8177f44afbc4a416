"""Tests for the pandas report views."""

from inventory_manager import reports, settings
from inventory_manager.store import InventoryStore


class TestFrames:
    """Tests for item and sale frames."""

    def test_empty_frames_keep_columns(self) -> None:
        assert list(reports.items_frame([]).columns) == settings.ITEM_COLUMNS
        assert list(reports.sales_frame([]).columns) == settings.SALE_COLUMNS

    def test_items_frame_values(self, seeded_store: InventoryStore) -> None:
        df = reports.items_frame(seeded_store.items)

        assert df["name"].tolist() == ["Widget", "Bolt", "Gadget"]
        assert df["selling_price"].tolist() == [8.0, 1.0, 15.0]

    def test_low_stock_sorted_by_quantity(self, seeded_store: InventoryStore) -> None:
        seeded_store.add("Nearly Out", "x", 1, 1.0, 2.0)

        df = reports.low_stock_frame(seeded_store)

        assert df["name"].tolist() == ["Nearly Out", "Bolt"]

    def test_search_frame(self, seeded_store: InventoryStore) -> None:
        assert reports.search_frame(seeded_store, "bol")["id"].tolist() == [2]
        assert reports.search_frame(seeded_store, "nothing").empty

    def test_sales_history_frame_newest_first(self, seeded_store: InventoryStore) -> None:
        seeded_store.sell(1, 1)
        seeded_store.sell(2, 1)

        assert reports.sales_history_frame(seeded_store)["item_name"].tolist() == ["Bolt", "Widget"]


class TestProfitSummary:
    """Tests for profit_summary."""

    def test_groups_by_item_and_sorts_by_profit(self, seeded_store: InventoryStore) -> None:
        seeded_store.sell(1, 2)  # 6.0
        seeded_store.sell(3, 1)  # 5.0
        seeded_store.sell(1, 1)  # 3.0
        seeded_store.delete(1)

        summary = reports.profit_summary(seeded_store.sales)

        assert summary.to_dict("records") == [
            {"item_id": 1, "item_name": "Widget", "units_sold": 3, "total_profit": 9.0},
            {"item_id": 3, "item_name": "Gadget", "units_sold": 1, "total_profit": 5.0},
        ]

    def test_empty_sales(self) -> None:
        summary = reports.profit_summary([])

        assert summary.empty
        assert list(summary.columns) == ["item_id", "item_name", "units_sold", "total_profit"]


class TestRender:
    """Tests for render."""

    def test_empty_frame_renders_message(self) -> None:
        assert reports.render(reports.items_frame([]), "Nothing here.") == "Nothing here."

    def test_frame_renders_without_index(self, seeded_store: InventoryStore) -> None:
        text = reports.render(reports.items_frame(seeded_store.items), "Nothing here.")

        assert text.splitlines()[0].split() == settings.ITEM_COLUMNS
        assert "Gadget" in text
