"""Common UI components."""
from components.common import (
    TAB_ENTER,
    TAB_LIST,
    approved_badge,
    get_header,
    get_tabs,
    status_message,
)

__all__ = [
    'get_header',
    'get_tabs',
    'status_message',
    'approved_badge',
    'TAB_ENTER',
    'TAB_LIST',
]
