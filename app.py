import streamlit as st

from domain.settings import get_settings
from services.context import get_context
from ui.components import inject_base_css
from utils.logging_setup import setup_logging
from views import compose, AUTH_SURFACE, VISITORS_SURFACE
from views import auth_panel, hero, visitors

# --- Surface Registry ---
# Maps a surface key returned by the view composer to its render function.
SURFACE_REGISTRY = {
    AUTH_SURFACE: {
        "label": "Sign in",
        "render_func": auth_panel.view,
        "authenticated": False,
    },
    VISITORS_SURFACE: {
        "label": "Visitors",
        "render_func": visitors.view,
        "authenticated": True,
    },
}


def main():
    """
    Application router.

    Renders the hero banner, then exactly one surface chosen by the view
    composer from the session credential.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    st.set_page_config(page_title=settings.APP_NAME, layout="wide")
    inject_base_css()

    ctx = get_context(st.session_state)

    hero.view()
    surface = SURFACE_REGISTRY[compose(ctx.session)]
    surface["render_func"](ctx)


if __name__ == "__main__":
    main()
