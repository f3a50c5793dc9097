# matching_core/config.py
from __future__ import annotations
import textwrap

# ===== Demo / CLI defaults =====
DEFAULT_CONFIG = {
    "rows": 10,
    "cols": 15,
    "max_value": 64,        # random weights are drawn from [0, max_value)
    "random_seed": None,
    "color": True,
    "check_invariants": True,
}

# ANSI colour for matched cells in terminal tables
MATCH_COLOR = 31

# ===== Sample config (written by the demo app, loadable with --config) =====
DEFAULT_CONFIG_YAML = textwrap.dedent("""\
rows: 4
cols: 6
max_value: 64
random_seed: 42
color: true
check_invariants: true
""")

# ===== Sample matrix (header-less CSV, row-major) =====
DEFAULT_SAMPLE_MATRIX_CSV = textwrap.dedent("""\
4,1,3
2,0,5
3,2,2
""")
