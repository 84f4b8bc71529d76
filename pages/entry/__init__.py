"""Entry page module.

- layout.py: New verification form
- callbacks.py: Save and form state callbacks
"""
from .layout import layout
from .callbacks import register_callbacks

__all__ = ['layout', 'register_callbacks']
