"""
Centralized constants shared by the services and views: backend endpoints,
session-state keys, demo credentials and user-facing messages.
"""

# Backend endpoints (relative to the configured base URL)
LOGIN_PATH = "/auth/login"
REGISTER_PATH = "/auth/register"
VISITORS_PATH = "/visitors"

# Keys used in st.session_state
CREDENTIAL_KEY = "credential"
CONTEXT_KEY = "app_context"

# Demo credentials pre-filled in the auth panel
DEMO_IDENTITY = "admin@example.com"
DEMO_SECRET = "password123"

LOGIN_FAILED = "Login failed"
REGISTER_FAILED = "Register failed"
SEARCH_FAILED = "Could not load visitors"
CREATE_FAILED = "Could not create visitor"

EMPTY_FIELD = "—"
