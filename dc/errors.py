from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ExportError(Exception):
    """Standard error raised while exporting a document.

    Parameters
    ----------
    code:
        Short machine readable error code.
    message:
        Human readable error message.
    """

    code: str
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code}: {self.message}"


class LanguageLookupError(ExportError, LookupError):
    """A language name has no entry in the language vocabulary."""

    def __init__(self, name: str):
        super().__init__("language_not_found", f"No ISO 639 code for language '{name}'")
        self.name = name


class UnknownExportFormat(ExportError, ValueError):
    """An export format name was never registered."""

    def __init__(self, fmt: str):
        super().__init__("unknown_format", f"Unknown export format '{fmt}'")
        self.format = fmt


__all__ = ["ExportError", "LanguageLookupError", "UnknownExportFormat"]
