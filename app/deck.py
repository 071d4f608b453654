from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Union
from zipfile import BadZipFile

import pandas as pd
from xlrd import XLRDError

from config import MAX_DECK_ROWS, SAMPLE_DECK_PATH
from exceptions import DeckEmpty, DeckFormatInvalid, DeckUnreadable, UnsupportedFileType
from log import get_logger

logger = get_logger("deck")

NUMBER_COL = "순번"
KOREAN_COL = "한글"
ENGLISH_COL = "영어"
DATE_COL = "암기날짜"
COLUMNS = [NUMBER_COL, KOREAN_COL, ENGLISH_COL, DATE_COL]
REQUIRED_COLUMNS = [KOREAN_COL, ENGLISH_COL]

EXCEL_SUFFIXES = {".xlsx", ".xls"}
SUPPORTED_SUFFIXES = EXCEL_SUFFIXES | {".csv"}

Source = Union[str, Path, IO[bytes]]


@dataclass(frozen=True)
class Sentence:
    """One row of a practice deck: a Korean prompt and its English answer."""

    number: int
    korean: str
    english: str
    memorized_on: str = ""


def _cell_text(value: object) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, (pd.Timestamp, dt.date)):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _row_number(value: object, fallback: int) -> int:
    text = _cell_text(value)
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return fallback


def read_frame(source: Source, filename: str) -> pd.DataFrame:
    """Read the first sheet (or the CSV body) of *source* into a DataFrame."""
    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFileType(filename)

    try:
        if suffix in EXCEL_SUFFIXES:
            frame = pd.read_excel(source, sheet_name=0, dtype=object)
        else:
            frame = pd.read_csv(source, dtype=object, encoding="utf-8-sig")
    except pd.errors.EmptyDataError:
        raise DeckEmpty(filename) from None
    except (ValueError, OSError, BadZipFile, XLRDError) as exc:
        raise DeckUnreadable(filename, str(exc)) from exc

    frame.columns = [str(column).strip() for column in frame.columns]
    return frame


def frame_to_deck(
    frame: pd.DataFrame,
    filename: str,
    max_rows: int = MAX_DECK_ROWS,
) -> list[Sentence]:
    """Validate a sentence table and convert its rows to Sentence objects."""
    if frame.empty:
        raise DeckEmpty(filename)

    missing = [column for column in REQUIRED_COLUMNS if column not in frame.columns]
    if missing:
        raise DeckFormatInvalid(filename, missing)

    sentences: list[Sentence] = []
    dropped = 0
    for position, row in enumerate(frame.to_dict("records"), start=1):
        korean = _cell_text(row.get(KOREAN_COL))
        english = _cell_text(row.get(ENGLISH_COL))
        if not korean or not english:
            dropped += 1
            continue
        sentences.append(
            Sentence(
                number=_row_number(row.get(NUMBER_COL), position),
                korean=korean,
                english=english,
                memorized_on=_cell_text(row.get(DATE_COL)),
            )
        )

    if dropped:
        logger.warning("Dropped %d incomplete rows from %s", dropped, filename)
    if len(sentences) > max_rows:
        logger.warning(
            "Deck %s has %d sentences, keeping the first %d",
            filename,
            len(sentences),
            max_rows,
        )
        sentences = sentences[:max_rows]
    if not sentences:
        raise DeckEmpty(filename)

    logger.info("Loaded %d sentences from %s", len(sentences), filename)
    return sentences


def load_deck(
    source: Source,
    filename: str | None = None,
    max_rows: int = MAX_DECK_ROWS,
) -> list[Sentence]:
    """
    Load a practice deck from an uploaded spreadsheet.

    *source* may be a path or a binary file object (e.g. a streamlit
    UploadedFile); *filename* decides the format and defaults to the
    path's name. Expected columns: 순번 | 한글 | 영어 | 암기날짜, of
    which only 한글 and 영어 are required.

    Raises UnsupportedFileType, DeckUnreadable, DeckEmpty or
    DeckFormatInvalid.
    """
    if filename is None:
        filename = getattr(source, "name", None) or Path(str(source)).name
    frame = read_frame(source, filename)
    return frame_to_deck(frame, filename, max_rows=max_rows)


def load_sample_deck() -> list[Sentence]:
    return load_deck(SAMPLE_DECK_PATH)


def deck_to_frame(sentences: list[Sentence]) -> pd.DataFrame:
    """Convert sentences back to a table with the upload column headers."""
    return pd.DataFrame(
        [
            {
                NUMBER_COL: sentence.number,
                KOREAN_COL: sentence.korean,
                ENGLISH_COL: sentence.english,
                DATE_COL: sentence.memorized_on,
            }
            for sentence in sentences
        ],
        columns=COLUMNS,
    )
