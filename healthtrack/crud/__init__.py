from .user import user
from .health_entry import health_entry
from .diary_entry import diary_entry

__all__ = ["user", "health_entry", "diary_entry"]
