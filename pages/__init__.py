"""Page modules for the MC-Check application."""
from pages import entry, verifications

__all__ = ['entry', 'verifications']
