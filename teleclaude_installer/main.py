from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

import yaml

from . import console
from .config import load_config
from .errors import InstallerError
from .lib.command import CommandError
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .state import InstallState
from .steps import (
    CompanionCliStep,
    DetectSystemStep,
    EnsureGitStep,
    EnsureNodeStep,
    InstallDepsStep,
    NextStepsStep,
    SetupHandoffStep,
    SyncRepoStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        DetectSystemStep(),
        EnsureGitStep(),
        EnsureNodeStep(),
        SyncRepoStep(),
        InstallDepsStep(),
        CompanionCliStep(),
        NextStepsStep(),
        SetupHandoffStep(),
    ]


def run(*, config_path: Optional[str] = None, input_fn: Optional[Callable[[str], str]] = None) -> InstallState:
    """Run the whole installer; raises on the first unrecoverable failure."""

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise InstallerError(f"Invalid installer config: {e}") from e

    actual_log_path = configure_logging(log_path=cfg.log_path)
    logger.debug("Config: install_dir=%s repo=%s dry_run=%s", cfg.install_dir, cfg.repo_url, cfg.dry_run)

    state = InstallState(config=cfg, input_fn=input_fn)

    try:
        result = run_pipeline(state=state, steps=build_steps())
    except Exception:
        logger.debug("Installer failed; full log at %s", actual_log_path, exc_info=True)
        raise
    logger.debug("Ran steps: %s", ", ".join(result.ran_steps))
    return result.state


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="teleclaude-install",
        description="Install TeleClaude and its prerequisites (git, Node.js 18+, Claude Code CLI).",
    )
    p.parse_args(argv)

    console.print_header()
    try:
        run()
    except (InstallerError, CommandError, OSError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
