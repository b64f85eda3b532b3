from pathlib import Path
from typing import Any, Dict, Iterator, Optional
import json

from dc.document import SemanticDocument


def _to_document(item: Dict[str, Any], base_url: Optional[str]) -> SemanticDocument:
    if base_url and "base_url" not in item:
        item = {**item, "base_url": base_url}
    return SemanticDocument.model_validate(item)


def iter_documents(path: Path, base_url: Optional[str] = None) -> Iterator[SemanticDocument]:
    """Yield documents from a JSON or JSON Lines file.

    A ``.jsonl`` file holds one document per line.  Any other file is read
    as JSON containing either a single document object or a list of them.

    Args:
        path: Path to the document file
        base_url: Repository URL for documents that do not carry one

    Yields:
        SemanticDocument instances in file order
    """
    with path.open("r", encoding="utf-8") as f:
        if path.suffix.lower() == ".jsonl":
            for line in f:
                if line.strip():
                    yield _to_document(json.loads(line), base_url)
            return
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    for item in data:
        yield _to_document(item, base_url)
