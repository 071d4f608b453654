"""Exception hierarchy for the sentence practice app."""


class PracticeError(Exception):
    """Base exception for all practice app errors."""


class ConfigError(PracticeError):
    """An environment setting could not be parsed."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: '{value}'")


class DeckError(PracticeError):
    """An uploaded sentence file could not be turned into a deck."""


class UnsupportedFileType(DeckError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Unsupported file type: '{filename}'")


class DeckUnreadable(DeckError):
    """The spreadsheet parser rejected the file."""

    def __init__(self, filename: str, detail: str):
        self.filename = filename
        self.detail = detail
        super().__init__(f"Could not read '{filename}': {detail}")


class DeckEmpty(DeckError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"No sentences found in '{filename}'")


class DeckFormatInvalid(DeckError):
    """Required columns are missing."""

    def __init__(self, filename: str, missing: list[str]):
        self.filename = filename
        self.missing = missing
        super().__init__(
            f"'{filename}' is missing columns: {', '.join(missing)}"
        )
