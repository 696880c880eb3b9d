# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Command line entrypoint: load datasets, then print tables or JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO

from .. import config
from ..common import configure_root_logger
from ..config import AREAS_DATASET, DatasetSpec
from ..export import render_areas, to_frame, to_json
from ..filters import ALL_TOKEN, Filters, parse_token_list, parse_years
from ..ingestion import compute_exit_code, load_all
from ..model import Areas

LOGGER = logging.getLogger(__name__)


def _split(raw: Optional[Iterable[str]]) -> List[str]:
    if not raw:
        return []
    items: List[str] = []
    for chunk in raw:
        items.extend(part.strip() for part in chunk.split(",") if part.strip())
    return items


def select_datasets(
    registry: Dict[str, DatasetSpec], requested: Optional[Iterable[str]]
) -> List[DatasetSpec]:
    """Return the dataset specs named in ``requested`` (all when omitted or ``all``).

    The authority code table is always included so areas carry their names.
    """

    codes = [code.lower() for code in _split(requested)]
    if not codes or ALL_TOKEN in codes:
        return list(registry.values())
    unknown = [code for code in codes if code not in registry]
    if unknown:
        raise ValueError(f"No dataset matches key: {', '.join(unknown)}")
    selected = [registry[code] for code in dict.fromkeys(codes)]
    if AREAS_DATASET in registry and AREAS_DATASET not in codes:
        selected.insert(0, registry[AREAS_DATASET])
    return selected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="areastats",
        description="Load area statistics datasets and print them as tables or JSON.",
    )
    parser.add_argument(
        "--dir",
        dest="data_dir",
        default=None,
        help="Directory containing the dataset files (default: $AREASTATS_DATA_DIR or ./datasets)",
    )
    parser.add_argument(
        "-d",
        "--datasets",
        action="append",
        help="Comma-separated dataset codes to import (omit or 'all' for every dataset)",
    )
    parser.add_argument(
        "-a",
        "--areas",
        action="append",
        help="Comma-separated authority codes or name fragments (omit or 'all' for every area)",
    )
    parser.add_argument(
        "-m",
        "--measures",
        action="append",
        help="Comma-separated measure codes (omit or 'all' for every measure)",
    )
    parser.add_argument(
        "-y",
        "--years",
        default=None,
        help="A year (YYYY) or inclusive range (YYYY-ZZZZ); 0 for all years",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-j", "--json", action="store_true", help="Print JSON instead of tables")
    output.add_argument("--csv", action="store_true", help="Print a tidy CSV (one row per value)")
    parser.add_argument("--log-level", dest="log_level", default="WARNING", help="Python logging level (default: WARNING)")
    return parser


def main(argv: list[str] | None = None, *, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    configure_root_logger(level=args.log_level)

    try:
        registry = config.load_datasets()
        datasets = select_datasets(registry, args.datasets)
        filters = Filters(
            areas=parse_token_list(args.areas),
            measures=parse_token_list(args.measures),
            years=parse_years(args.years),
        )
    except ValueError as exc:
        parser.error(str(exc))

    data_dir = Path(args.data_dir) if args.data_dir else config.data_dir()
    if not data_dir.exists():
        parser.error(f"data directory {data_dir} does not exist")

    areas = Areas()
    results = load_all(areas, data_dir, datasets, filters)
    LOGGER.info("loaded %s areas from %s datasets in %s", len(areas), len(results), data_dir)

    if args.json:
        out.write(to_json(areas) + "\n")
    elif args.csv:
        to_frame(areas).to_csv(out, index=False)
    else:
        out.write(render_areas(areas))

    return compute_exit_code(results)


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
