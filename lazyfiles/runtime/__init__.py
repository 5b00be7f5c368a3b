"""Runtime state and orchestration.

This package groups the navigation state, the background loader, the
browser session that ties them to the viewer, and the interactive shell.
"""

from __future__ import annotations


def run_shell(*args, **kwargs):
    """Lazily import the shell to avoid package-import cycles with rendering."""
    from .shell import BrowserShell

    BrowserShell(*args, **kwargs).run()
