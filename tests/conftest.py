"""Shared test fixtures: small sentence decks in each supported format."""

from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from deck import Sentence


@pytest.fixture()
def sentences() -> list[Sentence]:
    return [
        Sentence(1, "나는 해변에 갔다.", "I went to the beach.", "2025-03-01"),
        Sentence(2, "오늘 날씨가 정말 좋네요.", "The weather is really nice today.", "2025-03-01"),
        Sentence(3, "커피 한 잔 하실래요?", "Would you like a cup of coffee?", ""),
    ]


@pytest.fixture()
def csv_deck(tmp_path: Path) -> Path:
    path = tmp_path / "deck.csv"
    path.write_text(
        "순번,한글,영어,암기날짜\n"
        "1,나는 해변에 갔다.,I went to the beach.,2025-03-01\n"
        "2,다음 주에 다시 만나요.,Let's meet again next week.,\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def xlsx_deck(tmp_path: Path) -> Path:
    path = tmp_path / "deck.xlsx"
    frame = pd.DataFrame(
        {
            "순번": [1, 2],
            "한글": ["나는 해변에 갔다.", "다음 주에 다시 만나요."],
            "영어": ["I went to the beach.", "Let's meet again next week."],
            "암기날짜": [datetime(2025, 3, 1), datetime(2025, 3, 5)],
        }
    )
    frame.to_excel(path, index=False)
    return path
