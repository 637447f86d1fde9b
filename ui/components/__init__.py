"""
Reusable UI components for the Streamlit application.

- `base`: CSS injection and shared colors.
- `cards`: visitor rows and the visitor list.
- `visitor_form`: the new-visitor draft form.

Import from here (`from ui import components`) rather than the submodules.
"""

from .base import (
    inject_base_css,
)

from .cards import (
    contact_line,
    visitor_row,
    visitor_list,
)

from . import visitor_form
