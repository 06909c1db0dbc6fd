"""confdesk: a console desk for registering conference events.

This package provides an interactive menu to register workshops and
seminars for the current session and list them in summary or detailed
form. Nothing is persisted between runs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
