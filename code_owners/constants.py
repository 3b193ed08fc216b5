from typing import Final


CODEOWNERS_FILENAME: Final[str] = "CODEOWNERS"

UNOWNED_LABEL: Final[str] = "nobody"

OUTPUT_FORMATS: Final[tuple[str, ...]] = (
    "table",
    "json",
    "yaml",
)
