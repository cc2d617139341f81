from __future__ import annotations

import logging

from .. import console
from ..errors import InstallerError
from ..lib.installers import install_node, refresh_path
from ..lib.tools import check_node
from ..state import InstallState

logger = logging.getLogger(__name__)


class EnsureNodeStep:
    step_id = "30_ensure_node"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Checking Node.js")
        host = state.require_host()
        cfg = state.config

        status = check_node(cfg.node_min_major)
        if not status.ok:
            install_node(
                host.os,
                major=cfg.node_lts_major,
                pkg_url=cfg.node_pkg_url,
                dry_run=state.dry_run,
            )
            # New installs usually extend PATH from the shell profile.
            refresh_path(cfg.home, dry_run=state.dry_run)
            status = check_node(cfg.node_min_major)
            if not status.ok:
                logger.error("Failed to install Node.js")
                raise InstallerError(f"Node.js v{cfg.node_min_major}+ is still unavailable after installation")

        state.node_version = status.version
        return state
