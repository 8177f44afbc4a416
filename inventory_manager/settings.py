import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


def _resolve(path_str: str) -> Path:
    """Relative paths are anchored at BASE_DIR, absolute ones are kept."""
    path = Path(path_str)
    return path if path.is_absolute() else BASE_DIR / path


# --- Path Configuration ---
DATA_DIR = _resolve(os.getenv("DATA_DIR", "data"))
OUTPUT_DIR = _resolve(os.getenv("OUTPUT_DIR", "output"))

# --- Filename Configuration ---
ITEMS_FILENAME = os.getenv("ITEMS_FILENAME", "items.csv")
SALES_FILENAME = os.getenv("SALES_FILENAME", "sales.csv")
ITEMS_FILE = DATA_DIR / ITEMS_FILENAME
SALES_FILE = DATA_DIR / SALES_FILENAME

INVENTORY_REPORT_BASE = os.getenv("INVENTORY_REPORT_BASE", "inventory_report")
SALES_REPORT_BASE = os.getenv("SALES_REPORT_BASE", "sales_report")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# The console shares the terminal with the menu; raise this to WARNING to keep it quiet.
CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", LOG_LEVEL).upper()
LOG_DIR = _resolve(os.getenv("LOG_DIR", "logs"))
LOG_FILENAME = os.getenv("LOG_FILENAME", "inventory_manager.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))

# --- Shared Business Logic ---
# Items at or below this quantity show up in the low stock alert.
LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", "5"))

# Persisted column order. The CSV files have no header row, so position is the contract.
ITEM_COLUMNS = [
    "id",
    "name",
    "size_or_variant",
    "quantity",
    "purchase_price",
    "selling_price",
]
SALE_COLUMNS = [
    "id",
    "item_id",
    "item_name",
    "quantity_sold",
    "profit",
    "date_sold",
]

# Default items used when no persisted data exists.
SEED_ITEMS = [
    {"name": "Widget", "size_or_variant": "Small", "quantity": 10, "purchase_price": 5.0, "selling_price": 8.0},
    {"name": "Bolt", "size_or_variant": "Red", "quantity": 3, "purchase_price": 0.5, "selling_price": 1.0},
    {"name": "Gadget", "size_or_variant": "Blue", "quantity": 20, "purchase_price": 10.0, "selling_price": 15.0},
]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
