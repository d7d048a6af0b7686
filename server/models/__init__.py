# server/models/__init__.py

from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base


Base = declarative_base()

# Largest value a SQLite INTEGER column can hold
MAX_INTEGER = 2**63 - 1


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite hands back on reload."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


from .user import User  # noqa: E402
from .project import Project  # noqa: E402
from .column import BoardColumn  # noqa: E402
from .task import Task  # noqa: E402
