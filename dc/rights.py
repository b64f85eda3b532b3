"""Access level to rights vocabulary mapping."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

RIGHTS_PREFIX = "info:eu-repo/semantics/"


class AccessLevel(str, Enum):
    """Visibility of a document in the repository."""

    OPEN = "open"
    EMBARGOED = "embargoed"
    RESTRICTED = "restricted"
    CLOSED = "closed"

    @classmethod
    def parse(cls, value: Union["AccessLevel", str, None]) -> "AccessLevel":
        """Return the access level for ``value``, ``CLOSED`` when unrecognised."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logging.getLogger(__name__).debug(f"Unrecognised access level {value!r}, using closed")
            return cls.CLOSED


ACCESS_RIGHTS = {
    AccessLevel.OPEN: "openAccess",
    AccessLevel.EMBARGOED: "embargoedAccess",
    AccessLevel.RESTRICTED: "restrictedAccess",
    AccessLevel.CLOSED: "closedAccess",
}


def access_rights(level: Union[AccessLevel, str, None]) -> str:
    """Return the rights vocabulary term for ``level``."""

    return ACCESS_RIGHTS[AccessLevel.parse(level)]


def rights_uri(level: Union[AccessLevel, str, None], prefix: Optional[str] = None) -> str:
    """Return the rights URI for ``level``, e.g. ``info:eu-repo/semantics/openAccess``."""

    return f"{prefix or RIGHTS_PREFIX}{access_rights(level)}"


__all__ = ["AccessLevel", "ACCESS_RIGHTS", "RIGHTS_PREFIX", "access_rights", "rights_uri"]
