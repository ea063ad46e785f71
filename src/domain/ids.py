"""Server-generated record ids: ``<prefix>-<8 hex chars>``."""

from uuid import uuid4

PROJECT_ID_PREFIX = "proj"
CERTIFICATION_ID_PREFIX = "cert"
SERVICE_ID_PREFIX = "svc"


def new_record_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"
