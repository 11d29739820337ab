from typing import List

from console.context import AuthContext

ADMIN_DETAIL_LABELS = [
    ("Admin Name", "name"),
    ("Admin Email", "email"),
    ("Admin Contact", "phone"),
]


def admin_details(auth: AuthContext) -> List[str]:
    """Profile lines shown on the admin dashboard, blank values when signed out."""
    user = auth.get().user or {}
    return [f"{label} : {user.get(key) or ''}".rstrip() for label, key in ADMIN_DETAIL_LABELS]
