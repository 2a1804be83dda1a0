"""
Demo script: parse a file with the public API and log a summary.

Usage:
    python scripts/parse_file.py data.csv                   # rows, ',' delimiter
    python scripts/parse_file.py data.tsv --delimiter $'\t'
    python scripts/parse_file.py payload.json --value       # one structured value
    python scripts/parse_file.py data.csv --config rowval.yaml --parquet out.parquet
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("parse_file")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", help="Input file")
    parser.add_argument("--value", action="store_true", help="Parse one value instead of rows")
    parser.add_argument("--delimiter", default=None, help="Field delimiter (overrides config)")
    parser.add_argument("--config", default=None, help="rowval YAML config")
    parser.add_argument("--parquet", default=None, help="Write rows to this Parquet file")
    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import rowval

    args = _build_arg_parser().parse_args(argv)

    config = rowval.load_config(args.config) if args.config else rowval.ParserConfig()
    if args.delimiter is not None:
        data = config.model_dump()
        data["row"] = {"delimiter": args.delimiter}
        config = rowval.ParserConfig.model_validate(data)

    try:
        if args.value:
            value = rowval.read_value(args.path, config)
            log.info("Value: %r", rowval.to_python(value))
            return 0

        document = rowval.read_document(args.path, config)
        widths = sorted({len(row) for row in document})
        log.info("Rows: %d, field counts: %s", len(document), widths)
        if args.parquet:
            rowval.export_document(document, args.parquet)
    except rowval.ParseError as exc:
        log.error("Parse failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
