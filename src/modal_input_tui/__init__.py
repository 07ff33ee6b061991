"""Modal Input TUI - vim-style single-line text entry for the terminal.

Normal/Insert modes, word deletion and submission, built with
Textual + Rich.
"""

__version__ = "0.1.0"

from .app import ModalInputApp, run  # noqa: E402

__all__ = ["ModalInputApp", "run", "__version__"]
