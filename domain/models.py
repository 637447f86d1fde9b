from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class VisitorRecord:
    id: str
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class DraftVisitor:
    full_name: str = ''
    email: str = ''
    phone: str = ''

    def is_empty(self) -> bool:
        return not (self.full_name or self.email or self.phone)

    def to_form_fields(self) -> Dict[str, str]:
        # Multipart field names expected by POST /visitors
        return {
            'full_name': self.full_name,
            'email': self.email,
            'phone': self.phone,
        }


def visitor_from_dict(d: Dict[str, Any]) -> Optional[VisitorRecord]:
    """Safe conversion of a backend item, or None when it cannot be shown.

    The backend may return the identifier as `_id` (document store) or `id`.
    Unknown keys are dropped.
    """
    if not isinstance(d, dict):
        return None
    name = d.get('full_name')
    if not isinstance(name, str) or not name.strip():
        return None
    raw_id = d.get('id', d.get('_id'))
    return VisitorRecord(
        id='' if raw_id is None else str(raw_id),
        full_name=name,
        email=d.get('email') or None,
        phone=d.get('phone') or None,
    )
