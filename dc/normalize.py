from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
import tomllib

from .errors import LanguageLookupError

# Base directory for rule files
_RULES_DIR = Path(__file__).resolve().parent.parent / "config" / "rules"


@lru_cache(maxsize=None)
def _load_rules(name: str) -> Dict[str, Any]:
    """Load a TOML rule file from the configuration directory.

    Parameters
    ----------
    name: str
        Name of the rule file without extension, or a path to a TOML file.
    """

    path = Path(name) if name.endswith(".toml") else _RULES_DIR / f"{name}.toml"
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def language_vocabulary(rules: str = "languages") -> Mapping[str, str]:
    """Return the language name to ISO 639-2 code table.

    ``config/rules/languages.toml`` holds a ``[languages]`` table keyed by
    the Spanish language name as entered in the repository forms.
    """

    return MappingProxyType(_load_rules(rules).get("languages", {}))


def ascii_approximations(rules: str = "transliteration") -> Mapping[str, str]:
    """Return the letter to ASCII table for letters NFKD does not decompose."""

    return MappingProxyType(_load_rules(rules).get("approximations", {}))


def language_code(name: str, vocabulary: Optional[Mapping[str, str]] = None) -> str:
    """Return the ISO 639-2 code for the language ``name``.

    The lookup uses the exact spelling of ``name``.

    Raises
    ------
    LanguageLookupError
        If ``name`` is not in the vocabulary.
    """

    if vocabulary is None:
        vocabulary = language_vocabulary()
    try:
        return vocabulary[name]
    except KeyError:
        raise LanguageLookupError(name) from None


__all__ = ["ascii_approximations", "language_code", "language_vocabulary"]
