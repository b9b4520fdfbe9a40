"""Cash events loader.

Reads the cash events table (CSV with a header row) and validates every row
into a CashEvent, in file order. The first invalid row aborts the load.

Expected columns:
    name, usd, frequency, type_, is_taxable (optional)
"""

import re
from pathlib import Path
from typing import Any, Union

import pandas as pd
import structlog
from pydantic import ValidationError

from .exceptions import EventParseError, InputFileError
from .models import CashEvent

logger = structlog.get_logger()

REQUIRED_COLUMNS: tuple[str, ...] = ("name", "usd", "frequency", "type_")
OPTIONAL_COLUMNS: tuple[str, ...] = ("is_taxable",)

_PARSER_LINE = re.compile(r"line (\d+)")


def read_cash_events_table(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read the raw cash events table with every cell kept as text.

    Raises:
        InputFileError: If the file is missing, unreadable or not a table.
        EventParseError: If a required column is missing.
    """
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.ParserError as e:
        # pandas reports file lines; the header is line 1
        match = _PARSER_LINE.search(str(e))
        row = int(match.group(1)) - 1 if match else None
        raise EventParseError(
            f"Unable to parse record at row {row}: {e}" if row else f"Unable to parse table: {e}",
            row=row,
            details={"path": str(path)},
        ) from e
    except (OSError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise InputFileError(f"Unable to open file: {path} ({e})", path=str(path)) from e

    # Short rows leave trailing cells as NaN
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise EventParseError(
            f"Missing required columns: {missing}",
            field=missing[0],
            details={"columns": list(df.columns)},
        )
    return df


def _row_error(row_number: int, record: dict[str, Any], exc: ValidationError) -> EventParseError:
    """Convert the first pydantic error of a row into an EventParseError."""
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error.get("loc") else None
    original = error.get("ctx", {}).get("error")
    if isinstance(original, EventParseError):
        message = original.message
    elif isinstance(original, Exception):
        message = str(original)
    else:
        message = error["msg"]
    return EventParseError(
        f"Unable to parse record at row {row_number}: {message}",
        row=row_number,
        field=field,
        value=record.get(field) if field else None,
    )


def parse_cash_event(record: dict[str, Any], row_number: int) -> CashEvent:
    """Validate one table row into a CashEvent."""
    fields = {k: v for k, v in record.items() if k in REQUIRED_COLUMNS + OPTIONAL_COLUMNS}
    try:
        return CashEvent.model_validate(fields)
    except ValidationError as e:
        raise _row_error(row_number, fields, e) from e


def load_cash_events(path: Union[str, Path]) -> list[CashEvent]:
    """
    Load every cash event from a CSV file.

    Args:
        path: Path to the cash events CSV.

    Returns:
        Events in file order.

    Raises:
        InputFileError: If the file cannot be opened.
        EventParseError: If any row fails to parse; no events are returned.
    """
    df = read_cash_events_table(path)

    events = []
    for row_number, record in enumerate(df.to_dict(orient="records"), start=1):
        event = parse_cash_event(record, row_number)
        logger.debug("cash_event_loaded", row=row_number, cash_event=str(event))
        events.append(event)

    logger.info("cash_events_loaded", path=str(path), count=len(events))
    return events
