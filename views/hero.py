import streamlit as st

TITLE = "Visitor Pass Management"
TAGLINE = ("Digitize registrations, QR-based passes, and secure check-ins. "
           "Built with a modern stack and designed for speed.")


def view():
    st.markdown(
        f"""
        <div style="background:linear-gradient(180deg,#111827,#000);color:white;
                    padding:3rem 2rem 2rem;border-radius:12px;margin-bottom:1.5rem;">
            <div style="font-size:2.6rem;font-weight:700;letter-spacing:-0.02em;">{TITLE}</div>
            <div style="margin-top:0.8rem;opacity:0.8;max-width:40rem;">{TAGLINE}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
