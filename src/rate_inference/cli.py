"""Command-line entry point for inspecting rate tables and quote documents.

Usage:
    rate-inference table rates.csv --decimal-separator ,
    rate-inference document sample_quote.json --mapping-out mapping.json

Both commands print a JSON report to stdout.  Reading the files is the only
I/O; the analysis itself is done by the pure pipelines.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rate_inference.config import LOG_LEVEL
from rate_inference.document.pipeline import analyze_document_text
from rate_inference.errors import RateInferenceError
from rate_inference.table.pipeline import build_rate_rows, ingest_table

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    # utf-8-sig drops a BOM if the exporter wrote one
    return path.read_text(encoding="utf-8-sig")


def run_table(args: argparse.Namespace) -> dict:
    """Ingest a delimited rate table and report its mapping and normalized rows."""
    result = ingest_table(_read_text(args.file), args.decimal_separator)
    rows = build_rate_rows(result.table, result.mapping, result.decimal_separator, limit=args.limit)
    return {
        "headers": list(result.headers),
        "delimiter": result.table.delimiter,
        "decimalSeparator": result.decimal_separator,
        "columnMapping": result.mapping.bound(),
        "rowCount": len(result.table.rows),
        "rows": [row.model_dump() for row in rows],
    }


def run_document(args: argparse.Namespace) -> dict:
    """Analyze a sample quote document and report candidates, mapping and preview."""
    analysis = analyze_document_text(_read_text(args.file), args.sample_size)
    mapping = analysis.suggested_mapping.to_config() if analysis.suggested_mapping else None

    if args.mapping_out is not None:
        args.mapping_out.write_text(json.dumps(analysis.require_mapping().to_config(), indent=2) + "\n", encoding="utf-8")
        logger.info("Wrote mapping to %s", args.mapping_out)

    return {
        "rootKind": analysis.root_kind.value,
        "candidates": [{"path": c.path, "length": c.length, "score": c.score} for c in analysis.candidates],
        "bestPath": analysis.best.path if analysis.best else None,
        "mapping": mapping,
        "preview": [option.model_dump() for option in analysis.preview],
        "warning": analysis.warning,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rate-inference", description="Infer schemas of carrier rate tables and quote documents")
    sub = parser.add_subparsers(dest="command", required=True)

    table = sub.add_parser("table", help="Analyze a delimited rate table (CSV/TSV)")
    table.add_argument("file", type=Path, help="Path to the delimited text file")
    table.add_argument("--decimal-separator", choices=[".", ","], default=None, help="Decimal separator (default: inferred from delimiter)")
    table.add_argument("--limit", type=int, default=None, help="Only normalize the first N data rows")
    table.set_defaults(handler=run_table)

    document = sub.add_parser("document", help="Analyze a sample quote document (JSON)")
    document.add_argument("file", type=Path, help="Path to the JSON document")
    document.add_argument("--sample-size", type=int, default=None, help="Number of preview options (default: 10)")
    document.add_argument("--mapping-out", type=Path, default=None, help="Write the suggested mapping (persisted shape) here")
    document.set_defaults(handler=run_document)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s", stream=sys.stderr)
    args = build_parser().parse_args(argv)

    try:
        report = args.handler(args)
    except (RateInferenceError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
