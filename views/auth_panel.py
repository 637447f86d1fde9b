import streamlit as st

from domain.constants import DEMO_IDENTITY, DEMO_SECRET
from services.errors import AuthError
from utils.aio import run


def view(ctx):
    auth = ctx.auth
    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.container(border=True):
            st.subheader("Get Started")
            st.caption("Use demo credentials or register a new admin.")
            email = st.text_input("Email", value=DEMO_IDENTITY, key="auth_email")
            password = st.text_input("Password", value=DEMO_SECRET, type="password", key="auth_password")
            c1, c2 = st.columns(2)
            # The script run blocks until the exchange settles; the spinner below is the loading indicator
            login_clicked = c1.button("Login", type="primary")
            register_clicked = c2.button("Register")

            action = None
            if login_clicked:
                action = auth.login
            elif register_clicked:
                action = auth.register
            if action is not None:
                try:
                    with st.spinner("Signing in..."):
                        run(action(email, password))
                except AuthError as exc:
                    st.error(exc.message)
                else:
                    st.rerun()
            elif auth.error:
                # Keep the last failure visible across reruns until the next attempt
                st.error(auth.error)
