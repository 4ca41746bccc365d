"""
services - Business-logic layer sitting between API/UI and DB.
"""

from services.shipments_service import ShipmentsService                 # noqa: F401
from services.upload_service import extract_upload, upload_from_body     # noqa: F401
