"""Verification list page module.

This module provides the searchable, sortable list and the detail modal.
It is split into:
- layout.py: List layout, table rows and cards
- modal.py: Detail modal layout and its view/edit/delete-confirm states
- callbacks.py: All Dash callbacks for the list and modal
"""
from .layout import layout
from .modal import get_detail_modal
from .callbacks import register_callbacks

__all__ = ['layout', 'get_detail_modal', 'register_callbacks']
