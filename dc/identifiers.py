"""Author identifier records.

Creator and contributor values enriched from the national author registry
are stored as free text, one ``key: value`` pair per line::

    idCvuConacyt: 123
    nombres: Ana
    primerApellido: Ruiz

:class:`IdentifierRecord` parses that text and derives the display name and
the ``info:eu-repo/dai`` identifier used in the Dublin Core export.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

SEPARATOR = ": "
IDENTIFIER_PREFIX = "info:eu-repo/dai/mx/"

GIVEN_NAMES_KEY = "nombres"
FIRST_SURNAME_KEY = "primerApellido"
SECOND_SURNAME_KEY = "segundoApellido"


class IdentifierScheme(str, Enum):
    """Identifier schemes, keyed by the URI path segment."""

    CURP = "curp"
    CVU = "cvu"
    ORCID = "orcid"


# Priority order: national ID, then registry ID, then researcher ID
SCHEME_KEYS: Tuple[Tuple[IdentifierScheme, str], ...] = (
    (IdentifierScheme.CURP, "curp"),
    (IdentifierScheme.CVU, "idCvuConacyt"),
    (IdentifierScheme.ORCID, "idOrcid"),
)


@dataclass(frozen=True)
class IdentifierRecord:
    """Ordered key/value pairs parsed from one identifier text value.

    A key parsed from a line without a value maps to ``None`` but still
    counts as present.
    """

    entries: Dict[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: Optional[str]) -> "IdentifierRecord":
        """Parse newline separated ``key: value`` lines.

        Empty lines are skipped.  Each line is split on the first ``": "``;
        a line without the separator yields its text as key and ``None`` as
        value.  Later duplicate keys replace earlier ones.
        """

        entries: Dict[str, Optional[str]] = {}
        for line in (text or "").splitlines():
            if not line.strip():
                continue
            key, sep, value = line.partition(SEPARATOR)
            if not sep:
                logging.getLogger(__name__).debug(f"Identifier line without separator: {line!r}")
            entries[key] = value or None
        return cls(entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.entries.get(key, default)

    def identifier_scheme(self) -> Optional[IdentifierScheme]:
        """Return the first scheme whose key is present, or ``None``."""

        for scheme, key in SCHEME_KEYS:
            if key in self.entries:
                return scheme
        return None

    def identifier(self) -> Optional[str]:
        """Return the identifier value of the selected scheme."""

        scheme = self.identifier_scheme()
        if scheme is None:
            return None
        return self.entries[dict(SCHEME_KEYS)[scheme]]

    def identifier_uri(self, prefix: Optional[str] = None) -> Optional[str]:
        """Return ``info:eu-repo/dai/mx/<scheme>/<value>`` or ``None``."""

        scheme = self.identifier_scheme()
        if scheme is None:
            return None
        return f"{prefix or IDENTIFIER_PREFIX}{scheme.value}/{self.identifier() or ''}"

    def display_name(self) -> str:
        """Return given names and surnames separated by spaces."""

        name = f"{self.get(GIVEN_NAMES_KEY) or ''} {self.get(FIRST_SURNAME_KEY) or ''}"
        if SECOND_SURNAME_KEY in self.entries:
            name += f" {self.get(SECOND_SURNAME_KEY) or ''}"
        return name

    def to_dict(self) -> Dict[str, Optional[str]]:
        return dict(self.entries)


def parse_identifier_record(text: Optional[str]) -> IdentifierRecord:
    """Shortcut for :meth:`IdentifierRecord.parse`."""

    return IdentifierRecord.parse(text)


__all__ = [
    "IDENTIFIER_PREFIX",
    "IdentifierRecord",
    "IdentifierScheme",
    "SCHEME_KEYS",
    "parse_identifier_record",
]
