"""
Document References
===================

Records point at each other with document paths such as "staff/worker-001".
The database never resolves these; the helpers below only build and split them.
"""
from typing import Optional

STAFF = "staff"
TOOLS = "tools"
SYSTEM_STAFF_ID = "system"


def make_ref(collection: str, doc_id: str) -> str:
    """Build a "collection/id" path."""
    if not doc_id:
        raise ValueError("Document id is required to build a reference")
    return f"{collection}/{doc_id}"


def ref_id(path: Optional[str]) -> Optional[str]:
    """Return the document id at the end of a path, or None."""
    if not path:
        return None
    return path.rstrip("/").rsplit("/", 1)[-1]


def staff_ref(uid: str) -> str:
    return make_ref(STAFF, uid)


def tool_ref(tool_id: str) -> str:
    return make_ref(TOOLS, tool_id)
