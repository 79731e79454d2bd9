"""
Couche services (application).

Exports:
- MediaBrowserService : navigation dans la mediatheque (dossiers d'abord)
"""

from aircat.services.media_browser import MediaBrowserService

__all__ = ["MediaBrowserService"]
