import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Type

from pydantic import BaseModel, ValidationError

from . import reports, settings, utils
from .schemas import Item, LoadReport, RowIssue, Sale, SaveReport
from .store import InventoryStore

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = {"id", "item_id", "quantity", "quantity_sold", "purchase_price", "selling_price", "profit"}


# --- Writing ---


def _format_row(record: BaseModel, columns: list[str]) -> str:
    return ",".join(str(getattr(record, column)) for column in columns)


def _atomic_write(path: Path, lines: Iterable[str]):
    """
    Writes to a temporary file next to `path`, then swaps it into place.
    A failure part-way through leaves the previous file untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def save_store(
    store: InventoryStore,
    items_path: Optional[Path] = None,
    sales_path: Optional[Path] = None,
) -> SaveReport:
    """Writes every item and sale to their CSV files, replacing previous contents."""
    items_path = Path(items_path or settings.ITEMS_FILE)
    sales_path = Path(sales_path or settings.SALES_FILE)
    report = SaveReport()

    try:
        _atomic_write(items_path, (_format_row(item, settings.ITEM_COLUMNS) for item in store.items))
        report.items_saved = True
        logger.info(f"✅ [Saved] {len(store.items)} items to {items_path}")
    except OSError as e:
        report.errors.append(f"Could not save items to {items_path}: {e}")
        logger.error(f"❌ Could not save items to {items_path}. Reason: {e}")

    try:
        _atomic_write(sales_path, (_format_row(sale, settings.SALE_COLUMNS) for sale in store.sales))
        report.sales_saved = True
        logger.info(f"✅ [Saved] {len(store.sales)} sales to {sales_path}")
    except OSError as e:
        report.errors.append(f"Could not save sales to {sales_path}: {e}")
        logger.error(f"❌ Could not save sales to {sales_path}. Reason: {e}")

    return report


# --- Reading ---


def _split_records(text: str) -> list[str]:
    # Only "\n" ends a record; splitlines() would also break on \x0b, \x0c,
    # \x1c-\x1e, \x85, \u2028 and \u2029, all of which are legal inside a name.
    return text.split("\n")


def read_lines(file_path: Path) -> list[str] | None:
    """
    Reads a text file with an encoding fallback and returns its records.
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte sequence.
    Universal newline decoding has already turned "\\r\\n" into "\\n".
    Returns None when the file does not exist.
    """
    try:
        return _split_records(file_path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError:
        logger.info(f"INFO: No data file at {file_path}, skipping.")
        return None
    except UnicodeDecodeError:
        logger.info(f"INFO: UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        return _split_records(file_path.read_text(encoding="latin-1"))


def parse_rows(
    lines: list[str], model: Type[BaseModel], columns: list[str], source: str
) -> tuple[list, list[RowIssue]]:
    """
    Turns raw CSV lines into validated records.
    Blank lines are ignored; extra trailing fields are dropped. Short rows,
    unparseable numbers and repeated IDs are skipped and reported, not raised.
    """
    records = []
    issues: list[RowIssue] = []
    seen_ids: set[int] = set()

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        fields = line.split(",")
        if len(fields) < len(columns):
            issues.append(
                RowIssue(
                    source=source,
                    line_number=line_number,
                    reason=f"expected {len(columns)} fields, found {len(fields)}",
                    raw=line,
                )
            )
            continue

        row = {
            column: value.strip() if column in NUMERIC_FIELDS else value
            for column, value in zip(columns, fields)
        }
        try:
            record = model.model_validate(row)
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            issues.append(RowIssue(source=source, line_number=line_number, reason=reasons, raw=line))
            continue

        if record.id in seen_ids:
            issues.append(
                RowIssue(source=source, line_number=line_number, reason=f"duplicate id {record.id}", raw=line)
            )
            continue

        seen_ids.add(record.id)
        records.append(record)

    return records, issues


def _load_file(path: Path, model: Type[BaseModel], columns: list[str], report: LoadReport) -> list:
    try:
        lines = read_lines(path)
    except OSError as e:
        report.errors.append(f"Could not read {path}: {e}")
        logger.error(f"❌ Could not read {path}. Reason: {e}")
        return []

    if lines is None:
        return []

    records, issues = parse_rows(lines, model, columns, source=path.name)
    for issue in issues:
        logger.warning(f"⚠️ Skipped {issue.source} line {issue.line_number}: {issue.reason}")
    report.skipped.extend(issues)
    return records


def load_store(
    store: InventoryStore,
    items_path: Optional[Path] = None,
    sales_path: Optional[Path] = None,
) -> LoadReport:
    """
    Replaces the store's contents with what is on disk.
    When neither file yields any record and nothing went wrong, the store is
    seeded with the default sample items instead.
    """
    items_path = Path(items_path or settings.ITEMS_FILE)
    sales_path = Path(sales_path or settings.SALES_FILE)
    report = LoadReport()

    store.clear()
    items = _load_file(items_path, Item, settings.ITEM_COLUMNS, report)
    sales = _load_file(sales_path, Sale, settings.SALE_COLUMNS, report)
    store.restore(items, sales)

    report.items_loaded = len(items)
    report.sales_loaded = len(sales)
    logger.info(f"[Loaded] {report.items_loaded} items.")
    logger.info(f"[Loaded] {report.sales_loaded} sales records.")

    if store.is_empty():
        if report.ok:
            store.seed()
            report.seeded = True
            logger.info("[Info] No previous data found. Seeded default items.")
        else:
            logger.warning("⚠️ Nothing loaded and the data files have problems. Not seeding defaults.")

    return report


# --- Report export ---


def export_reports(store: InventoryStore, output_dir: Optional[Path] = None) -> dict[str, Path]:
    """Saves a dated inventory and sales snapshot to CSV and conditionally to JSON."""
    output_dir = Path(output_dir or settings.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    written: dict[str, Path] = {}
    exports = [
        ("inventory", settings.INVENTORY_REPORT_BASE, Item, store.items, reports.items_frame(store.items)),
        ("sales", settings.SALES_REPORT_BASE, Sale, store.sales, reports.sales_frame(store.sales)),
    ]

    for key, base_name, model, records, df in exports:
        csv_path = output_dir / f"{base_name}_{date_suffix}.csv"
        csv_columns = {field: info.alias for field, info in model.model_fields.items()}
        df.rename(columns=csv_columns).to_csv(csv_path, index=False)
        written[f"{key}_csv"] = csv_path
        logger.info(f"✅ {key.capitalize()} report saved to: {csv_path}")

        if settings.SAVE_JSON_OUTPUT:
            json_path = output_dir / f"{base_name}_{date_suffix}.json"
            with open(json_path, "w", encoding="utf-8") as f:
                json.dump([record.model_dump(by_alias=True) for record in records], f, indent=2)
            written[f"{key}_json"] = json_path
            logger.info(f"✅ JSON output saved to: {json_path}")

    if not settings.SAVE_JSON_OUTPUT:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written
