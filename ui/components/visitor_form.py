import streamlit as st
from typing import Optional

from domain.models import DraftVisitor

FIELDS = ("full_name", "email", "phone")
LABELS = {"full_name": "Full name", "email": "Email", "phone": "Phone"}


def widget_keys(key_prefix: str):
    return [f"{key_prefix}_{f}" for f in FIELDS]


def clear(key_prefix: str):
    """Drop the form's widget state so the next render starts from an empty draft.

    Must run before the form is rendered in the script run.
    """
    for k in widget_keys(key_prefix):
        st.session_state.pop(k, None)


def render(draft: DraftVisitor, key_prefix: str) -> Optional[DraftVisitor]:
    """
    Renders the new-visitor form pre-filled from the current draft.

    Returns:
        DraftVisitor: the submitted draft, or None if the form was not submitted.
    """
    with st.form(f"form_{key_prefix}", clear_on_submit=False):
        st.markdown("**New Visitor**")
        values = {}
        for f in FIELDS:
            values[f] = st.text_input(
                LABELS[f], value=getattr(draft, f), placeholder=LABELS[f], key=f"{key_prefix}_{f}")
        submitted = st.form_submit_button("Create")

    if submitted:
        return DraftVisitor(**{f: (values[f] or '').strip() for f in FIELDS})
    return None
