from models import storage
from utils.exceptions import InvalidInput


def apply_ordering(cls, orders) -> int:
    """orders: [{'id': ..., 'order': n}]; every id must exist."""
    session = storage.get_session()
    ids = [item["id"] for item in orders]
    rows = {row.id: row for row in session.query(cls).filter(cls.id.in_(ids)).all()}
    missing = [i for i in ids if i not in rows]
    if missing:
        raise InvalidInput(f"Unknown id(s): {', '.join(missing)}")
    for item in orders:
        rows[item["id"]].order = item["order"]
    storage.save()
    return len(rows)
