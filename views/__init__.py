"""View modules and the view composer.

The app shows exactly one surface at a time, chosen from session state alone:
the auth panel while no credential is held, the visitors surface once one is.
Each surface module exposes a `view(ctx)` function registered in
`SURFACE_REGISTRY` inside `app.py`.
"""
AUTH_SURFACE = "auth"
VISITORS_SURFACE = "visitors"


def is_authenticated(session) -> bool:
    return session.get() is not None


def compose(session) -> str:
    return VISITORS_SURFACE if is_authenticated(session) else AUTH_SURFACE
