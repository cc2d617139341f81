"""
Tests for installer strategy selection and execution.
"""

import os

import pytest

from teleclaude_installer.errors import InstallerError
from teleclaude_installer.lib import installers
from teleclaude_installer.lib.installers import (
    install_git,
    install_node,
    nvm_available,
    refresh_path,
    select_strategy,
)


def only(*probes):
    allowed = set(probes)
    return lambda probe: probe is None or probe in allowed


class TestSelectStrategy:
    def test_first_available_wins(self):
        s = select_strategy("node", "linux", available=only("dnf", "pacman"))
        assert s.name == "dnf"

    def test_nvm_preferred_on_linux(self):
        s = select_strategy("node", "wsl", available=only("nvm", "apt-get"))
        assert s.name == "nvm"

    def test_macos_falls_back_to_official_pkg(self):
        s = select_strategy("node", "macos", available=only())
        assert s.name == "official-pkg"

    def test_macos_git_falls_back_to_xcode(self):
        assert select_strategy("git", "macos", available=only()).name == "xcode-select"

    def test_linux_without_package_manager(self):
        assert select_strategy("node", "linux", available=only()) is None

    def test_no_entry_for_windows(self):
        assert select_strategy("git", "windows", available=only("winget")) is None


class TestRender:
    def test_major_and_url_substituted(self):
        pkg = select_strategy("node", "macos", available=only())
        cmds = pkg.render({"major": 20, "pkg_url": "https://example.invalid/node.pkg"})
        assert cmds[0] == ["curl", "-fsSL", "https://example.invalid/node.pkg", "-o", "/tmp/node.pkg"]

    def test_nvm_script_keeps_shell_expansion(self):
        nvm = select_strategy("node", "linux", available=only("nvm"))
        (script,) = nvm.render({"major": 20, "pkg_url": ""})
        assert '"${NVM_DIR:-$HOME/.nvm}/nvm.sh"' in script
        assert "nvm install 20" in script


class TestInstallNode:
    def test_apt_runs_nodesource_then_apt(self, shell):
        shell.install("apt-get")
        install_node("linux", major=20)
        assert shell.calls == [
            ["bash", "-c", "curl -fsSL https://deb.nodesource.com/setup_20.x | sudo -E bash -"],
            ["sudo", "apt-get", "install", "-y", "nodejs"],
        ]

    def test_homebrew_on_macos(self, shell):
        shell.install("brew")
        install_node("macos", major=20)
        assert shell.calls[0] == ["brew", "install", "node@20"]
        assert shell.calls[1] == ["brew", "link", "node@20", "--force", "--overwrite"]

    def test_no_package_manager_is_fatal(self, shell):
        with pytest.raises(InstallerError):
            install_node("linux")
        assert shell.calls == []

    def test_windows_is_fatal(self, shell):
        with pytest.raises(InstallerError):
            install_node("windows")

    def test_unknown_is_fatal(self, shell):
        with pytest.raises(InstallerError):
            install_node("unknown")

    def test_failing_command_propagates(self, shell):
        from teleclaude_installer.lib.command import CommandError

        shell.install("dnf")
        shell.respond(["sudo", "dnf", "install", "-y", "nodejs"], returncode=1)
        with pytest.raises(CommandError):
            install_node("linux")


class TestInstallGit:
    def test_apt_updates_first(self, shell):
        shell.install("apt-get")
        install_git("wsl")
        assert shell.calls == [
            ["sudo", "apt-get", "update"],
            ["sudo", "apt-get", "install", "-y", "git"],
        ]

    def test_nothing_available_only_warns(self, shell):
        assert install_git("linux") is None
        assert shell.calls == []


class TestNvmAvailable:
    def test_uses_nvm_dir(self, tmp_path):
        (tmp_path / "nvm.sh").write_text("")
        assert nvm_available({"NVM_DIR": str(tmp_path)})

    def test_defaults_to_home(self, tmp_path):
        assert not nvm_available({"HOME": str(tmp_path)})
        (tmp_path / ".nvm").mkdir()
        (tmp_path / ".nvm" / "nvm.sh").write_text("")
        assert nvm_available({"HOME": str(tmp_path)})


class TestRefreshPath:
    def test_new_entries_prepended(self, shell, isolated_env):
        (isolated_env / ".bashrc").write_text("export PATH=/opt/node/bin:$PATH\n")
        shell.install("bash")
        env = {"PATH": "/usr/bin"}
        script = f'. "{isolated_env / ".bashrc"}" >/dev/null 2>&1; printf %s "$PATH"'
        shell.respond(["bash", "-c", script], stdout="/opt/node/bin" + os.pathsep + "/usr/bin")

        added = refresh_path(str(isolated_env), environ=env)

        assert added == ["/opt/node/bin"]
        assert env["PATH"] == "/opt/node/bin" + os.pathsep + "/usr/bin"

    def test_missing_profiles_do_nothing(self, shell, isolated_env):
        shell.install("bash")
        shell.install("zsh")
        env = {"PATH": "/usr/bin"}
        assert refresh_path(str(isolated_env), environ=env) == []
        assert shell.calls == []

    def test_failure_is_ignored(self, shell, isolated_env):
        (isolated_env / ".zshrc").write_text("broken(\n")
        shell.install("zsh")
        script = f'. "{isolated_env / ".zshrc"}" >/dev/null 2>&1; printf %s "$PATH"'
        shell.respond(["zsh", "-c", script], returncode=1)
        env = {"PATH": "/usr/bin"}
        assert refresh_path(str(isolated_env), environ=env) == []
        assert env["PATH"] == "/usr/bin"

    def test_dry_run_reaches_the_shell(self, shell, isolated_env):
        (isolated_env / ".bashrc").write_text("export PATH=/opt/node/bin:$PATH\n")
        shell.install("bash")
        refresh_path(str(isolated_env), environ={"PATH": "/usr/bin"}, dry_run=True)
        assert shell.calls[0][0] == "bash"
        assert shell.dry_runs == [True]
