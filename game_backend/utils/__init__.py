# game_backend/utils/__init__.py
"""
Utility functions package.

- general.py: request parsing, service result handling and error handlers
"""

from .general import read_json_body, get_string, get_int, require_path_param
from .general import _handle_service_result, register_error_handlers

__all__ = [
    'read_json_body',
    'get_string',
    'get_int',
    'require_path_param',
    '_handle_service_result',
    'register_error_handlers',
]
