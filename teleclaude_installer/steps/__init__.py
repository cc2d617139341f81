from .step_10_detect_system import DetectSystemStep
from .step_20_ensure_git import EnsureGitStep
from .step_30_ensure_node import EnsureNodeStep
from .step_40_sync_repo import SyncRepoStep
from .step_50_install_deps import InstallDepsStep
from .step_60_companion_cli import CompanionCliStep
from .step_70_next_steps import NextStepsStep
from .step_80_setup_handoff import SetupHandoffStep

__all__ = [
    "DetectSystemStep",
    "EnsureGitStep",
    "EnsureNodeStep",
    "SyncRepoStep",
    "InstallDepsStep",
    "CompanionCliStep",
    "NextStepsStep",
    "SetupHandoffStep",
]
