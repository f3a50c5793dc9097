# matching_core/cli.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
import numpy as np
import pandas as pd
import yaml

from matching_core.config import DEFAULT_CONFIG
from matching_core.errors import MatchingError
from matching_core.hungarian import match
from matching_core.io import load_config_yaml, load_matrix_csv, random_matrix, read_matrix
from matching_core.models import AppConfig
from matching_core.render import format_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kuhn-match",
        description="Minimum-cost assignment of rows to columns (Hungarian algorithm).",
    )
    ap.add_argument("rows", type=int, nargs="?", help="row count; with COLS, read ROWS*COLS integers from stdin")
    ap.add_argument("cols", type=int, nargs="?", help="column count (>= ROWS)")
    ap.add_argument("--random", action="store_true", help="synthesize a random matrix of the given shape")
    ap.add_argument("--csv", type=str, default=None, help="read the matrix from a header-less CSV file")
    ap.add_argument("--config", type=str, default=None, help="YAML file with defaults")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--max-value", type=int, default=None, help="random weights are drawn from [0, MAX_VALUE)")
    ap.add_argument("--no-color", action="store_true")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING if verbosity == 0 else logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(args) -> AppConfig:
    cfg = load_config_yaml(args.config) if args.config else AppConfig(**DEFAULT_CONFIG)
    updates = {}
    if args.rows is not None:
        updates["rows"] = args.rows
        updates["cols"] = args.cols
    if args.seed is not None:
        updates["random_seed"] = args.seed
    if args.max_value is not None:
        updates["max_value"] = args.max_value
    if args.no_color:
        updates["color"] = False
    return AppConfig(**{**cfg.model_dump(), **updates})


def _load_matrix(args, cfg: AppConfig) -> np.ndarray:
    if args.csv:
        return load_matrix_csv(args.csv)
    if args.rows is None or args.random:
        rng = np.random.default_rng(cfg.random_seed)
        return random_matrix(cfg.rows, cfg.cols, cfg.max_value, rng)
    return read_matrix(sys.stdin, cfg.rows, cfg.cols)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _setup_logging(args.verbose)

    if (args.rows is None) != (args.cols is None):
        ap.error("give both ROWS and COLS, or neither")
    if args.random and args.rows is None:
        ap.error("--random needs ROWS and COLS")

    try:
        cfg = _load_config(args)
    except (OSError, yaml.YAMLError, ValueError) as e:
        ap.error(str(e))

    try:
        matrix = _load_matrix(args, cfg)
        result = match(matrix, cfg.solver_config())
    except (OSError, pd.errors.ParserError, MatchingError) as e:
        ap.error(str(e))

    print("\nInput:\n")
    print(format_table(matrix, None, color=cfg.color))
    print("\nOutput:\n")
    print(format_table(matrix, result.assignment, color=cfg.color))
    print(f"\nSum: {result.total_cost}\n")
    logger.info("phases=%d rebalances=%d", result.phases, result.rebalances)
    return 0


if __name__ == "__main__":
    sys.exit(main())
