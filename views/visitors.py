import streamlit as st

from services.errors import CreateError, SearchError
from ui.components import visitor_form, visitor_list
from utils.aio import run

FORM_KEY = "new_visitor"


def view(ctx):
    repo = ctx.visitors

    # Deferred draft cleanup after a successful create
    if st.session_state.pop('clear_visitor_draft', False):
        visitor_form.clear(FORM_KEY)

    try:
        run(repo.ensure_initial_load())
    except SearchError as exc:
        st.error(exc.message)

    head, search_col, button_col = st.columns([4, 3, 1])
    with head:
        st.header("Visitors")
    with search_col:
        # The search box value is the active query, even before Search is pressed
        repo.query = st.text_input("Search", value=repo.query, placeholder="Search",
                                   key="visitor_query", label_visibility="collapsed")
    with button_col:
        if st.button("Search", type="primary"):
            try:
                run(repo.search())
            except SearchError as exc:
                st.error(exc.message)

    form_col, list_col = st.columns(2)
    with form_col:
        with st.container(border=True):
            submitted = visitor_form.render(repo.draft, key_prefix=FORM_KEY)
            if submitted is not None:
                repo.draft = submitted
                try:
                    run(repo.create())
                except CreateError as exc:
                    st.error(exc.message)
                except SearchError as exc:
                    # Visitor was stored; only the refresh failed
                    st.session_state.clear_visitor_draft = True
                    st.warning(exc.message)
                else:
                    st.session_state.clear_visitor_draft = True
                    st.rerun()
    with list_col:
        with st.container(border=True):
            st.markdown("**All Visitors**")
            visitor_list(repo.items)
