"""
db - Database layer.

Public API:
    init_db()        → create engine + tables
    get_session()    → new Session
    ExportShipment   → ORM model
"""

from db.engine import init_db, get_engine, get_session    # noqa: F401
from db.models import Base, ExportShipment                # noqa: F401
