"""
Helper Functions

Contains utility functions used throughout the application.
"""

import re
from typing import Dict, Optional

from flask import has_request_context, request

_LETTER_RE = re.compile(r'[A-Za-z]')
_WORD_RE = re.compile(r'[A-Z]+')


def normalize_letter(key) -> Optional[str]:
    """Return the uppercase form of a single A-Z key, or None for anything else."""
    if not isinstance(key, str) or not _LETTER_RE.fullmatch(key):
        return None
    return key.upper()


def is_word(text, length: int) -> bool:
    """Check that text is exactly ``length`` uppercase A-Z letters."""
    return isinstance(text, str) and len(text) == length and _WORD_RE.fullmatch(text) is not None


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        if not has_request_context():
            return {'user_ip': 'system', 'session_id': None}
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO connection id
    }
