from pathlib import Path
from typing import Iterable
import json
import re

from dc.document import SemanticDocument

_UNSAFE_FILENAME = re.compile(r"[^0-9A-Za-z._-]")


def write_export(output_dir: Path, document_id: str, content: str, suffix: str = ".xml") -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{_UNSAFE_FILENAME.sub('_', document_id)}{suffix}"
    out_path.write_text(content, encoding="utf-8")
    return out_path


def write_documents_jsonl(path: Path, documents: Iterable[SemanticDocument]) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for document in documents:
            f.write(json.dumps(document.model_dump(by_alias=True), ensure_ascii=False) + "\n")
            count += 1
    return count
