"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract player identity information from an HTTP or Socket.IO request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Set for Socket.IO events
    }
