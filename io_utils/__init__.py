from .logs import setup_logging
from .read import iter_documents
from .write import write_documents_jsonl, write_export

__all__ = [
    "setup_logging",
    "iter_documents",
    "write_documents_jsonl",
    "write_export",
]
