"""
HueWheel Request ID Utilities
Generate unique request IDs for tracing palette requests.
"""
import uuid
from datetime import datetime

REQUEST_ID_PREFIX = "pal"


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracking.

    Returns:
        Request ID of the form pal-YYYYmmddHHMMSS-xxxxxxxx
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{REQUEST_ID_PREFIX}-{timestamp}-{short_uuid}"

