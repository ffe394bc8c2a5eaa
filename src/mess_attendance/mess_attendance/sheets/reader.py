from __future__ import annotations

import io
import logging
from datetime import date

import pandas as pd

from ..core.constants import ALLOWED_EXTENSIONS, MIN_GRID_ROWS
from ..core.exceptions import FormatError, UnsupportedFormatError
from .model import Grid

logger = logging.getLogger(__name__)


def file_extension(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def allowed_file(filename: str) -> bool:
    return file_extension(filename) in ALLOWED_EXTENSIONS


def cell_text(value) -> str:
    """Render a raw cell value the way the spreadsheet displays it.

    Date cells render as the full month name (``"March"``), since a date only
    ever appears as the value of the "Month" label.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if pd.isna(value):
        return ""
    if isinstance(value, date):
        return value.strftime("%B")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_grid(filename: str, data: bytes) -> Grid:
    """Read the first sheet of an Excel file into a rectangular grid of text.

    Missing cells come back as empty strings so every row has the same width.
    The extension only gates the upload; pandas picks the engine from the file
    content, so an .xlsx workbook saved under an .xls name still reads.
    """
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedFormatError("Please upload an Excel file (.xlsx or .xls)")

    try:
        df = pd.read_excel(
            io.BytesIO(data),
            sheet_name=0,
            header=None,
            dtype=object,
        )
    except Exception as e:
        logger.warning("Could not read %s as a spreadsheet: %s", filename, e)
        raise FormatError("Failed to process file. Please check the file format.") from e

    grid = [[cell_text(v) for v in row] for row in df.itertuples(index=False, name=None)]
    if len(grid) < MIN_GRID_ROWS:
        raise FormatError("Excel file appears to be empty or invalid")
    return grid
