from __future__ import annotations

import logging

from .. import console
from ..errors import InstallerError
from ..lib import osdetect
from ..lib.osdetect import describe_host, detect_host
from ..logging_utils import success
from ..state import InstallState

logger = logging.getLogger(__name__)


class DetectSystemStep:
    step_id = "10_detect_system"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Detecting System")

        host = detect_host()
        state.host = host

        if host.supported:
            success(logger, "Detected: %s", describe_host(host))
            return state

        if host.os == osdetect.WINDOWS:
            logger.warning("Detected: Windows (native)")
            logger.info("For Windows, consider using WSL or the install.bat script")
            logger.info("Download: %s", state.config.docs_url)
            raise InstallerError("Native Windows is not supported by this installer")

        logger.error("Unknown operating system")
        raise InstallerError(f"Unknown operating system ({host.arch})")
