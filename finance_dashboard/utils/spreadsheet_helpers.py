import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

# A parsed sheet row: column label -> raw cell value.
Row = Mapping[str, Any]

MONTH_KEYS = ("Month", "month")
AMOUNT_KEYS = ("Amount", "amount")


class SpreadsheetError(ValueError):
    """The uploaded workbook (or its first sheet) could not be read."""


def read_first_sheet(path) -> List[dict]:
    """
    Read the first worksheet of an .xlsx file into a list of row mappings.

    The first row holds the column labels; every following non-blank row
    becomes one dict. Cells missing from a row come back as None and
    columns without a label are ignored.
    """
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise SpreadsheetError(f"Empty or invalid sheet: {exc}") from exc

    try:
        if not wb.sheetnames:
            raise SpreadsheetError("Empty or invalid sheet")
        ws = wb[wb.sheetnames[0]]

        rows = ws.iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            return []
        labels = [str(h).strip() if h is not None else None for h in header]

        records = []
        for values in rows:
            if values is None or all(v is None or v == "" for v in values):
                continue
            row = {}
            for i, label in enumerate(labels):
                if not label:
                    continue
                row[label] = values[i] if i < len(values) else None
            records.append(row)
        return records
    finally:
        wb.close()


def _first_present(row: Row, keys: Tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _to_number(value: Any) -> float:
    # float() takes digit separators ("1_000"); a spreadsheet amount must not
    if isinstance(value, str) and "_" in value:
        return math.nan
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan
    return number


def extract_records(rows: Iterable[Row]) -> List[Tuple[str, float]]:
    """
    Turn sheet rows into (month, amount) pairs, keeping input order.

    Rows without a month, without an amount, or whose amount is not a
    finite number are skipped silently.
    """
    extracted = []
    skipped = 0
    for row in rows:
        month = _first_present(row, MONTH_KEYS)
        amount = _first_present(row, AMOUNT_KEYS)

        if not month or amount is None or amount == "":
            skipped += 1
            continue

        number = _to_number(amount)
        if not math.isfinite(number):
            skipped += 1
            continue

        extracted.append((str(month), number))

    if skipped:
        logger.debug("Skipped %d invalid rows", skipped)
    return extracted
