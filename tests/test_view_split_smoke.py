from unittest.mock import patch, MagicMock

from services.session import SessionStore

# Mock streamlit before importing the app
st_mock = MagicMock()


def test_surface_registry_structure():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import SURFACE_REGISTRY
    """
    Tests that the SURFACE_REGISTRY has the correct structure.
    """
    assert isinstance(SURFACE_REGISTRY, dict)
    for key, value in SURFACE_REGISTRY.items():
        assert "label" in value
        assert "render_func" in value
        assert "authenticated" in value
        assert callable(value["render_func"])
        assert isinstance(value["authenticated"], bool)


def test_composer_keys_are_registered():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import SURFACE_REGISTRY
        from views import compose
    session = SessionStore({})
    assert SURFACE_REGISTRY[compose(session)]["authenticated"] is False
    session.set("tok-1")
    assert SURFACE_REGISTRY[compose(session)]["authenticated"] is True


def test_only_one_surface_per_auth_state():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import SURFACE_REGISTRY
    flags = [v["authenticated"] for v in SURFACE_REGISTRY.values()]
    assert sorted(flags) == [False, True]
