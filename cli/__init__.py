"""
tdux CLI

Commands:
- tdux demo - Dispatch actions against the modal example store
- tdux version - Show version information
"""

from tdux import __version__

__all__ = ["__version__"]
