"""
tdux - typed two-phase action dispatcher.

One reducer per action type mutates application state ("should" phase),
then observers are notified with the new and previous value ("did" phase).
"""

__version__ = "0.1.0"
