"""Rule-based reservation and contact data extraction for CRM auto-fill."""

from .version import __version__

__all__ = ["__version__"]
