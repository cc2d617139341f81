from __future__ import annotations


class InstallerError(RuntimeError):
    """Unrecoverable installer condition; the run stops with exit code 1."""
