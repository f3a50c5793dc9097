# matching_core/io.py
from __future__ import annotations
import io
import logging
from typing import List, Optional, Sequence, Tuple
import numpy as np
import pandas as pd
import yaml

from matching_core.errors import InvalidMatrix, InvalidShape
from matching_core.models import AppConfig

logger = logging.getLogger(__name__)


def parse_matrix_text(text: str, rows: int, cols: int) -> np.ndarray:
    """rows * cols whitespace-separated integers, row-major. Extra tokens are ignored."""
    if rows <= 0 or cols <= 0:
        raise InvalidShape(f"shape must be positive, got {rows}x{cols}")
    tokens = text.split()
    need = rows * cols
    if len(tokens) < need:
        raise InvalidMatrix(f"expected {need} integers for a {rows}x{cols} matrix, got {len(tokens)}")
    if len(tokens) > need:
        logger.warning("ignoring %d trailing token(s) after %dx%d matrix", len(tokens) - need, rows, cols)
    try:
        values = [int(tok) for tok in tokens[:need]]
    except ValueError as e:
        raise InvalidMatrix(f"matrix values must be integers: {e}") from e
    try:
        return np.array(values, dtype=np.int64).reshape(rows, cols)
    except OverflowError as e:
        raise InvalidMatrix("matrix values must fit in 64-bit integers") from e


def read_matrix(stream, rows: int, cols: int) -> np.ndarray:
    return parse_matrix_text(stream.read(), rows, cols)


def load_matrix_csv(file_like) -> np.ndarray:
    """Header-less CSV, one matrix row per line. Accepts a path, bytes or a file-like."""
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    try:
        df = pd.read_csv(file_like, header=None, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise InvalidShape("matrix CSV is empty") from e
    if df.isna().any().any():
        raise InvalidMatrix("matrix CSV has missing cells")
    return df.to_numpy()


def random_matrix(rows: int, cols: int, max_value: int = 64, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Uniform weights in [0, max_value)."""
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(0, max_value, size=(rows, cols), dtype=np.int64)


def assignment_frame(matrix, assignment: Sequence[Tuple[int, int]]) -> pd.DataFrame:
    t = np.asarray(matrix)
    records: List[dict] = [{"row": int(r), "col": int(c), "cost": int(t[r, c])} for r, c in assignment]
    return pd.DataFrame(records, columns=["row", "col", "cost"])


def save_assignment_csv_bytes(matrix, assignment: Sequence[Tuple[int, int]]) -> bytes:
    buf = io.StringIO()
    assignment_frame(matrix, assignment).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def load_config_yaml(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"Config {path} must be a mapping.")
    return AppConfig(**obj)


def dump_config_yaml(config: AppConfig) -> str:
    return yaml.safe_dump(config.model_dump(), sort_keys=False)
