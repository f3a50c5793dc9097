# FILE: pages/1_Config.py
import streamlit as st
import yaml

from matching_core.config import DEFAULT_CONFIG, DEFAULT_CONFIG_YAML
from matching_core.io import dump_config_yaml
from matching_core.models import AppConfig

st.title("1. Config")
st.write("Edit the defaults as YAML; the same file can be passed to `kuhn-match --config`.")

current = st.session_state.get("app_config", AppConfig(**DEFAULT_CONFIG))
text = st.text_area("config.yaml", value=dump_config_yaml(current), height=220)

c1, c2 = st.columns(2)
with c1:
    if st.button("Apply"):
        try:
            st.session_state.app_config = AppConfig(**(yaml.safe_load(text) or {}))
            st.session_state.result = None
            st.success("Config applied.")
        except (yaml.YAMLError, TypeError, ValueError) as e:
            st.error(f"Invalid config: {e}")
with c2:
    st.download_button("sample config.yaml", data=DEFAULT_CONFIG_YAML, file_name="config.yaml", mime="text/yaml")
