"""Operator-facing text that is not a log line: banner, section headings,
next-steps block and the final yes/no prompt."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

RULE = "  " + "=" * 44

_DECLINE = re.compile(r"^[Nn]$")


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def print_header(stream: Optional[TextIO] = None) -> None:
    out = _out(stream)
    print("", file=out)
    print(RULE, file=out)
    print("  TeleClaude Installer", file=out)
    print("  Control Claude Code from Telegram", file=out)
    print(RULE, file=out)
    print("", file=out)


def print_step(title: str, stream: Optional[TextIO] = None) -> None:
    out = _out(stream)
    print("", file=out)
    print(f"  --- {title} ---", file=out)
    print("", file=out)


def print_next_steps(install_dir: Path, docs_url: str, stream: Optional[TextIO] = None) -> None:
    out = _out(stream)
    lines = [
        "",
        RULE,
        "  Installation Complete!",
        RULE,
        "",
        "  Next Steps:",
        "",
        "  1. Navigate to the install directory:",
        f"     cd {install_dir}",
        "",
        "  2. Run the setup wizard:",
        "     npm run setup",
        "",
        "  The setup wizard will guide you through:",
        "     - Choosing CLI mode (local terminal chat) or Telegram mode",
        "     - Authenticating with Claude Code",
        "     - Creating a Telegram bot (if using Telegram mode)",
        "     - Configuring allowed users and working directory",
        "",
        "  Quick Commands:",
        "     npm run chat      - Start local CLI chat",
        "     npm start         - Start Telegram bridge",
        "     npm run setup     - Re-run setup wizard",
        "",
        f"  Documentation: {docs_url}",
        "",
    ]
    print("\n".join(lines), file=out)


def is_decline(response: str) -> bool:
    """Only a lone 'n' or 'N' declines; empty input means yes."""
    return bool(_DECLINE.match(response.strip()))


def confirm_setup(input_fn: Optional[Callable[[str], str]] = None) -> bool:
    """Ask whether to run the setup wizard now (default: yes).

    EOF (no terminal attached) is treated as a decline.
    """

    ask = input_fn or input
    try:
        response = ask("  Would you like to run the setup wizard now? (Y/n) ")
    except EOFError:
        return False
    return not is_decline(response)
