"""
Application shell: startup configuration.
"""

from .config import bootstrap, configure_logging

__all__ = ["bootstrap", "configure_logging"]
