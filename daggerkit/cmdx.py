"""Building and formatting of command lines for container execution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import timedelta


def build_args(*args: str) -> list[str]:
    """Split every argument on whitespace and return the pieces in order.

    Blank arguments are dropped.
    """
    return [part for arg in args for part in arg.split()]


def generate_command(command: str, *args: str) -> list[str]:
    """Return ``command`` followed by ``args``.

    Empty arguments are skipped. An argument containing a space that does not
    start with a quote is split once, at its first space.
    """
    if not command:
        raise ValueError("command cannot be empty")
    result = [command]
    for arg in args:
        if not arg:
            continue
        if " " in arg and not arg.startswith(("'", '"')):
            head, tail = arg.split(" ", 1)
            result.extend((head, tail))
        else:
            result.append(arg)
    return result


def convert_cmd_to_string(cmd: Sequence[str]) -> str:
    """Join the parts of a command with single spaces."""
    return " ".join(cmd)


def generate_sh_command(command: str, *args: str) -> str:
    """Return the command and its non-empty arguments wrapped in ``sh -c "..."``."""
    if not command:
        raise ValueError("command cannot be empty")
    parts = [command, *(arg for arg in args if arg)]
    return f'sh -c "{convert_cmd_to_string(parts)}"'


def generate_sh_command_as_dagger_cmd(command: str, *args: str) -> list[str]:
    """Return the ``sh -c`` wrapped command as a one-element command list."""
    return [generate_sh_command(command, *args)]


def generate_dagger_cmd_from_str(commands: str) -> list[str]:
    """Split a plain command string on whitespace."""
    if not commands.strip():
        raise ValueError("command string cannot be empty")
    parts = commands.split()
    if not parts:
        raise ValueError("invalid command string")
    return parts


def pt_to_slice(cmd: Sequence[str] | None) -> list[str]:
    """Return the command as a plain list; ``None`` is rejected."""
    if cmd is None:
        raise ValueError("input DaggerCMD cannot be nil")
    return list(cmd)


def build_curl_command(
    base_url: str,
    headers: Mapping[str, str] | None,
    timeout: timedelta | float,
    auth_type: str,
    auth_credentials: str,
) -> str:
    """Return a curl command line for ``base_url``.

    ``timeout`` is a ``timedelta`` or a number of seconds; fractions are
    truncated. ``auth_type`` may be ``"basic"`` or ``"bearer"``; any other
    value adds no authentication.
    """
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else timeout
    parts = [f"curl -m {int(seconds)}"]
    for key, value in (headers or {}).items():
        parts.append(f" -H '{key}: {value}'")
    if auth_type == "basic":
        parts.append(f" -u '{auth_credentials}'")
    elif auth_type == "bearer":
        parts.append(f" -H 'Authorization: Bearer {auth_credentials}'")
    parts.append(f" '{base_url}'")
    return "".join(parts)