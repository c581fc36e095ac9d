# ordermatch/routers/__init__.py

from ordermatch.routers import health
from ordermatch.routers import match

__all__ = ["health", "match"]
