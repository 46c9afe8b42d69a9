from phinpt.core.config import settings
from phinpt.core.base import Base
from phinpt.core.db import engine, get_db
from phinpt.core.database import init_database

__all__ = ["settings", "engine", "Base", "get_db", "init_database"]
