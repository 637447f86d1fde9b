import streamlit as st

PRIMARY_BG = "#111827"  # dark slate
MUTED = "#6B7280"  # gray-500
BORDER = "#E5E7EB"  # gray-200


def inject_base_css():
    # Injected on every script run; Streamlit rebuilds the page each rerun
    st.markdown(
        f"""
        <style>
        .visitor-row {{padding:10px 0; border-bottom:1px solid {BORDER};}}
        .visitor-row:last-child {{border-bottom:none;}}
        .visitor-name {{font-weight:600;}}
        .visitor-contact {{font-size:0.85rem; color:{MUTED};}}
        div[data-testid="stButton"] button[kind="primary"] {{background:{PRIMARY_BG}; border-color:{PRIMARY_BG};}}
        </style>
        """,
        unsafe_allow_html=True,
    )
