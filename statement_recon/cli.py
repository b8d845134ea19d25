# statement_recon/cli.py

"""
Command-line host for the reconciliation engine.

    statement-recon internal.csv provider.csv --export-dir out/
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from statement_recon.config import get_settings
from statement_recon.core.csv_parser import read_csv_file
from statement_recon.core.errors import ReconError
from statement_recon.core.export import CATEGORY_LABELS, export_category
from statement_recon.core.matching import ReconciliationResult
from statement_recon.models import CATEGORIES, ReconciliationSummary
from statement_recon.services.reconciliation import reconcile_rows


def write_exports(result: ReconciliationResult, out_dir: Path, delimiter: str = ",", encoding: str = "utf-8") -> list[Path]:
    """Write every non-empty category to out_dir. Returns the written paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for category in CATEGORIES:
        if not result.category(category):
            continue
        filename, content = export_category(result, category, delimiter=delimiter)
        path = out_dir / filename
        path.write_text(content, encoding=encoding)
        written.append(path)

    return written


def format_summary(summary: ReconciliationSummary) -> str:
    return "\n".join([
        f"Internal rows:   {summary.total_internal}",
        f"Provider rows:   {summary.total_provider}",
        f"{CATEGORY_LABELS['matched']}: {summary.matched_count}",
        f"{CATEGORY_LABELS['mismatched']}: {summary.mismatched_count}",
        f"{CATEGORY_LABELS['internal_only']}: {summary.internal_only_count}",
        f"{CATEGORY_LABELS['provider_only']}: {summary.provider_only_count}",
    ])


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()

    ap = argparse.ArgumentParser(description="Reconcile an internal ledger against a provider statement")
    ap.add_argument("internal", type=Path, help="Internal ledger CSV")
    ap.add_argument("provider", type=Path, help="Provider statement CSV")
    ap.add_argument("--export-dir", type=Path, default=None, help="Write one CSV per non-empty category here")
    ap.add_argument("--json", action="store_true", help="Print the full result as JSON")
    ap.add_argument("--delimiter", default=settings.csv_delimiter)
    args = ap.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        internal_rows = read_csv_file(args.internal, args.delimiter, settings.upload_encoding)
        provider_rows = read_csv_file(args.provider, args.delimiter, settings.upload_encoding)
        result = reconcile_rows(internal_rows, provider_rows)
    except ReconError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_summary(result.summary))

    if args.export_dir is not None:
        for path in write_exports(result, args.export_dir, args.delimiter, settings.export_encoding):
            print(f"Wrote: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
