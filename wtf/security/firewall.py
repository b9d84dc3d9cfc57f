"""Firewall status probe.

Shells out to the platform's firewall tool and maps its output to a short
label with colour tags, e.g. "[green]Enabled[white]". Linux needs UFW and
permission to run "sudo ufw status" without a password prompt.
"""

import subprocess
import sys

OSX_FIREWALL_CMD = "/usr/libexec/ApplicationFirewall/socketfilterfw"

LINUX_STATUS_CMD = ["sudo", "ufw", "status"]

WINDOWS_PROFILE_COUNT_CMD = [
    "powershell.exe",
    "-NoProfile",
    "-Command",
    "& { ((Get-NetFirewallProfile | select name,enabled)"
    " | where { $_.Enabled -eq $True } | measure ).Count }",
]

ENABLED = "[green]Enabled[white]"
DISABLED = "[red]Disabled[white]"
CONFIG_NEEDED = "[red]Config Needed[white]"
NOT_APPLICABLE = "[white]N/A[white]"

# Number of enabled Windows firewall profiles (domain, private, public)
WINDOWS_PROFILE_LABELS = {
    "3": "[green]Good[white] (3/3)",
    "2": "[orange]Poor[white] (2/3)",
    "1": "[yellow]Bad[white] (1/3)",
    "0": DISABLED,
}


def firewall_state() -> str:
    """Return whether the firewall is enabled, as a colour-tagged label."""
    platform = _current_platform()

    if platform.startswith("linux"):
        return _firewall_state_linux()
    if platform == "darwin":
        return _firewall_state_macos()
    if platform == "win32":
        return _firewall_state_windows()

    return NOT_APPLICABLE


def firewall_stealth_state() -> str:
    """Return whether stealth mode (ignoring unsolicited pings) is on.

    Only macOS has the concept; other platforms always report N/A.
    """
    if _current_platform() == "darwin":
        return _status_label(_run([OSX_FIREWALL_CMD, "--getstealthmode"]))

    return NOT_APPLICABLE


def _current_platform() -> str:
    return sys.platform


def _firewall_state_linux() -> str:
    try:
        result = subprocess.run(LINUX_STATUS_CMD, capture_output=True, text=True)
    except OSError:
        return CONFIG_NEEDED

    if result.returncode != 0:
        return CONFIG_NEEDED

    if "inactive" in result.stdout:
        return DISABLED

    return ENABLED


def _firewall_state_macos() -> str:
    return _status_label(_run([OSX_FIREWALL_CMD, "--getglobalstate"]))


def _firewall_state_windows() -> str:
    # PowerShell output comes back as "3\r\n"
    count = _run(WINDOWS_PROFILE_COUNT_CMD).strip()
    return WINDOWS_PROFILE_LABELS.get(count, NOT_APPLICABLE)


def _run(cmd: list[str]) -> str:
    """Run a command and return its stdout, or "" if it couldn't be run."""
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError:
        return ""

    return result.stdout


def _status_label(output: str) -> str:
    if "enabled" in output:
        return ENABLED

    return DISABLED
