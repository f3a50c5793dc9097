# FILE: pages/2_Self_Test.py
import streamlit as st
from matching_core.validation import run_self_test

st.title("2. Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for name, ok in results["tests"]:
        (st.success if ok else st.error)(name)

st.write("Checks the solver against brute force on small matrices.")
