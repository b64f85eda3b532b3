from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from .identifiers import IDENTIFIER_PREFIX
from .rights import RIGHTS_PREFIX

DEFAULT_BASE_URL = "http://repositorio.colmex.mx/concern"
CLASSIFICATION_PREFIX = "info:eu-repo/classification/cti/"


class ExportSettings(BaseModel):
    """Repository specific values used by the Dublin Core export.

    Mirrors the ``[export]`` section of the configuration file.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    classification_prefix: str = CLASSIFICATION_PREFIX
    rights_prefix: str = RIGHTS_PREFIX
    identifier_prefix: str = IDENTIFIER_PREFIX
    language_rules: str = "languages"
    default_format: str = "oai_dc_xml"

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]] = None) -> "ExportSettings":
        """Build settings from a full configuration dictionary."""

        return cls(**(cfg or {}).get("export", {}))


DEFAULT_SETTINGS = ExportSettings()

__all__ = ["DEFAULT_SETTINGS", "ExportSettings"]
