# app.py
import numpy as np
import pandas as pd
import streamlit as st

from matching_core.config import DEFAULT_CONFIG, DEFAULT_SAMPLE_MATRIX_CSV
from matching_core.errors import MatchingError
from matching_core.hungarian import match
from matching_core.io import (
    assignment_frame,
    load_matrix_csv,
    parse_matrix_text,
    random_matrix,
    save_assignment_csv_bytes,
)
from matching_core.models import AppConfig
from matching_core.render import assignment_mask, matrix_frame


# ---------- Page ----------
st.set_page_config(page_title="Assignment Solver", layout="wide")


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("app_config", AppConfig(**DEFAULT_CONFIG))
    ss.setdefault("matrix", None)
    ss.setdefault("result", None)

_init_state()


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Matrix")
    cfg = st.session_state.app_config
    rows = st.number_input("Rows", min_value=1, max_value=60, value=cfg.rows, step=1)
    cols = st.number_input("Columns", min_value=1, max_value=60, value=cfg.cols, step=1)
    max_value = st.number_input("Max weight (exclusive)", min_value=1, max_value=10_000, value=cfg.max_value, step=1)
    seed = st.number_input("Random seed", min_value=0, max_value=10_000, value=cfg.random_seed or 0, step=1)

    if st.button("Generate random matrix", use_container_width=True):
        try:
            st.session_state.app_config = AppConfig(
                rows=rows, cols=cols, max_value=max_value, random_seed=seed,
                color=cfg.color, check_invariants=cfg.check_invariants,
            )
        except ValueError as e:
            st.error(str(e))
        else:
            rng = np.random.default_rng(seed)
            st.session_state.matrix = random_matrix(rows, cols, max_value, rng)
            st.session_state.result = None

    st.divider()
    st.subheader("📄 Files")
    uploaded = st.file_uploader("Matrix CSV (no header)", type=["csv"])
    if uploaded is not None:
        try:
            st.session_state.matrix = load_matrix_csv(uploaded)
            st.session_state.result = None
        except (MatchingError, ValueError) as e:
            st.error(f"Could not read CSV: {e}")
    st.download_button(
        "sample_matrix.csv",
        data=DEFAULT_SAMPLE_MATRIX_CSV.encode("utf-8"),
        file_name="sample_matrix.csv",
        mime="text/csv",
        use_container_width=True,
    )


# ---------- Main ----------
st.title("Minimum-cost assignment")
st.caption("Each row is matched to a distinct column so that the total weight is minimal (Hungarian algorithm).")

with st.expander("Paste a matrix"):
    text = st.text_area("Integers, row-major", value="")
    if st.button("Use pasted matrix") and text.strip():
        try:
            st.session_state.matrix = parse_matrix_text(text, int(rows), int(cols))
            st.session_state.result = None
        except MatchingError as e:
            st.error(str(e))

matrix = st.session_state.matrix
if matrix is None:
    st.info("Generate, upload or paste a matrix to begin.")
    st.stop()

st.subheader("Input")
st.dataframe(matrix_frame(matrix), use_container_width=True)

if st.button("Solve", type="primary"):
    try:
        st.session_state.result = match(matrix, st.session_state.app_config.solver_config())
    except MatchingError as e:
        st.error(str(e))

result = st.session_state.result
if result is not None:
    st.subheader("Output")
    mask = pd.DataFrame(
        assignment_mask(np.asarray(matrix).shape, result.assignment),
        index=matrix_frame(matrix).index,
        columns=matrix_frame(matrix).columns,
    )
    styled = matrix_frame(matrix).style.apply(
        lambda _: np.where(mask, "background-color: #25d790; color: #071423", ""), axis=None
    )
    st.dataframe(styled, use_container_width=True)

    c1, c2, c3 = st.columns(3)
    c1.metric("Total cost", result.total_cost)
    c2.metric("Augmenting phases", result.phases)
    c3.metric("Rebalances", result.rebalances)

    st.dataframe(assignment_frame(matrix, result.assignment), use_container_width=True)
    st.download_button(
        "Download assignment CSV",
        data=save_assignment_csv_bytes(matrix, result.assignment),
        file_name="assignment.csv",
        mime="text/csv",
    )
