"""TeleClaude installer.

Bootstraps the TeleClaude chat bridge on a workstation:
- Detect the host OS (macOS, Linux, WSL)
- Ensure git and Node.js 18+ are installed
- Clone or update the TeleClaude repository and install its npm dependencies
- Install the Claude Code CLI if missing
- Hand off to the project's own setup wizard
"""

__all__ = []
