from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional
import tomllib

import typer

from dc import ExportError, ExportSettings, export_as, export_formats
from enrichment import AssignorJob, StaticAuthorRegistry
from indexing import configured_schema, solr_names
from io_utils.logs import setup_logging
from io_utils.read import iter_documents
from io_utils.write import write_documents_jsonl, write_export


def load_config(config_path: Optional[Path]) -> Dict[str, Any]:
    cfg_path = resources.files("config").joinpath("config.default.toml")
    with cfg_path.open("rb") as f:
        config = tomllib.load(f)
    if config_path:
        with config_path.open("rb") as f:
            user_cfg = tomllib.load(f)
        _deep_update(config, user_cfg)
    return config


def _deep_update(d: Dict[str, Any], u: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict) and isinstance(d.get(k), dict):
            _deep_update(d[k], v)
        else:
            d[k] = v
    return d


def setup_run(config: Optional[Path]) -> Dict[str, Any]:
    """Load configuration and configure logging for a command."""
    cfg = load_config(config)
    log_cfg = cfg.get("logging", {})
    log_file = log_cfg.get("log_file")
    setup_logging(log_cfg.get("level", "INFO"), Path(log_file) if log_file else None)
    return cfg


app = typer.Typer(help="Repository Dublin Core export and index schema tools")

_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    dir_okay=False,
    file_okay=True,
    help="Optional config file",
)


@app.command()
def export(
    input: Path = typer.Option(
        ...,
        "--input",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON or JSONL file of documents",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        file_okay=False,
        dir_okay=True,
        help="Directory for one XML file per document (default: stdout)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Export format name (xml, dc_xml, oai_dc_xml)",
    ),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Export documents as Dublin Core XML."""
    cfg = setup_run(config)
    settings = ExportSettings.from_config(cfg)
    fmt = fmt or settings.default_format
    if fmt not in export_formats():
        typer.echo(
            f"Error: format must be one of {', '.join(export_formats())}, got '{fmt}'", err=True
        )
        raise typer.Exit(1)

    count = 0
    try:
        for document in iter_documents(input, settings.base_url):
            xml = export_as(document, fmt, settings=settings)
            if output is None:
                typer.echo(xml)
            else:
                write_export(output, document.id, xml)
            count += 1
    except ExportError as e:
        typer.echo(f"Export failed: {e}", err=True)
        raise typer.Exit(1)

    logging.info("Exported %d document(s) as %s", count, fmt)
    if output is not None:
        typer.echo(f"Exported {count} document(s) to {output}")


@app.command()
def schema(
    base: Optional[Path] = typer.Option(
        None,
        "--base",
        "-b",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="JSON file with the base schema ({field: [behavior, ...]})",
    ),
    solr: bool = typer.Option(
        False,
        "--solr/--no-solr",
        help="Include the Solr field names of each entry",
    ),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Print the composed index schema as JSON."""
    cfg = setup_run(config)
    base_schema = None
    if base is not None:
        with base.open("r", encoding="utf-8") as f:
            base_schema = json.load(f)

    index_schema = configured_schema(cfg.get("index", {}), base_schema)
    if solr:
        try:
            payload = {
                name: {"as": obj.as_list(), "solr": solr_names(obj)}
                for name, obj in index_schema.items()
            }
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        payload = index_schema.to_dict()
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def enrich(
    input: Path = typer.Option(
        ...,
        "--input",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON or JSONL file of documents",
    ),
    registry: Path = typer.Option(
        ...,
        "--registry",
        "-r",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON file mapping query names to author registry entries",
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        dir_okay=False,
        file_okay=True,
        help="JSONL file for the enriched documents",
    ),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Attach author registry identifier records to documents."""
    cfg = setup_run(config)
    settings = ExportSettings.from_config(cfg)
    job = AssignorJob(StaticAuthorRegistry.from_json(registry))
    count = write_documents_jsonl(output, job.run(iter_documents(input, settings.base_url)))
    typer.echo(f"Enriched {count} document(s), {job.matched} identifier record(s) assigned")


if __name__ == "__main__":
    app()
