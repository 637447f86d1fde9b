import html
from typing import Iterable

import streamlit as st

from domain.constants import EMPTY_FIELD
from domain.models import VisitorRecord


def contact_line(visitor: VisitorRecord) -> str:
    return f"{visitor.email or EMPTY_FIELD} · {visitor.phone or EMPTY_FIELD}"


def visitor_row(visitor: VisitorRecord):
    """
    Displays one visitor with name and contact details.
    """
    st.markdown(
        f"""
        <div class="visitor-row">
            <div class="visitor-name">{html.escape(visitor.full_name)}</div>
            <div class="visitor-contact">{html.escape(contact_line(visitor))}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def visitor_list(visitors: Iterable[VisitorRecord]):
    visitors = list(visitors)
    if not visitors:
        st.caption("No visitors to show.")
        return
    for v in visitors:
        visitor_row(v)
