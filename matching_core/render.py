# matching_core/render.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple
import numpy as np
import pandas as pd

from matching_core.config import MATCH_COLOR


def assignment_mask(shape: Tuple[int, int], assignment: Optional[Sequence[Tuple[int, int]]]) -> np.ndarray:
    mask = np.zeros(shape, dtype=bool)
    for r, c in assignment or ():
        mask[r, c] = True
    return mask


def format_table(matrix, assignment: Optional[Sequence[Tuple[int, int]]] = None, color: bool = True) -> str:
    """
    Terminal rendering of the matrix: 5-wide cells, matched ones suffixed
    with '^' (and coloured when `color` is on), blank line between rows.
    """
    t = np.asarray(matrix)
    mask = assignment_mask(t.shape, assignment)
    lines = []
    for i in range(t.shape[0]):
        cells = []
        for j in range(t.shape[1]):
            text = f"{int(t[i, j]):5d}{'^' if mask[i, j] else ' '}"
            if mask[i, j] and color:
                text = f"\033[{MATCH_COLOR}m{text}\033[m"
            cells.append(text + "   ")
        lines.append("    " + "".join(cells))
        lines.append("")
    return "\n".join(lines) + "\n"


def matrix_frame(matrix) -> pd.DataFrame:
    t = np.asarray(matrix)
    return pd.DataFrame(
        t,
        index=[f"r{i}" for i in range(t.shape[0])],
        columns=[f"c{j}" for j in range(t.shape[1])],
    )
