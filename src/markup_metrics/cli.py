from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .config import MetricsConfig, load_config
from .models import Document, DocumentMetrics
from .readability import readability_tone
from .stats import compute_corpus_metrics

app = typer.Typer(help="Markup document text-metrics CLI.", no_args_is_help=True)


class DocumentSummary(TypedDict):
    doc_id: str
    word_count: int
    char_count: int
    readability_score: int
    readability_label: str


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, readable=True, dir_okay=False
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Readability label language ('en' or 'pt')."
    ),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format ('json' or 'text')."
    ),
) -> None:
    """Compute word count, character count and readability for each document."""
    cfg = _load_cli_config(config, language, output_format)
    documents = _load_documents(input_path, cfg.input_extensions)
    results = compute_corpus_metrics(documents, cfg.label_language)

    if cfg.output_format == "text":
        for doc_id, metrics in sorted(results.items()):
            typer.echo(_format_text(doc_id, metrics))
        return

    summary = _build_summary(results)
    typer.echo(json.dumps({"documents": summary}, indent=cfg.json_indent))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = MetricsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _load_cli_config(
    config_path: Path | None, language: str | None, output_format: str | None
) -> MetricsConfig:
    """Load the config file (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(config_path)
        if language:
            cfg.label_language = language
        if output_format:
            cfg.output_format = output_format
        cfg.validate()
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


def _load_documents(input_path: Path, extensions: List[str]) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    suffixes = {ext.lower() for ext in extensions}
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in suffixes
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a markup file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, DocumentMetrics]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, metrics in sorted(results.items()):
        summary.append({"doc_id": doc_id, **metrics.to_dict()})
    return summary


def _format_text(doc_id: str, metrics: DocumentMetrics) -> str:
    rows: List[Tuple[str, object]] = [
        ("Words", metrics.word_count),
        ("Characters", metrics.char_count),
        (
            "Readability",
            f"{metrics.readability_score} ({metrics.readability_label}, "
            f"{readability_tone(metrics.readability_score)})",
        ),
    ]
    lines = [f"File: {doc_id}"]
    lines.extend(f"  {name}: {value}" for name, value in rows)
    return "\n".join(lines)


if __name__ == "__main__":
    main()
