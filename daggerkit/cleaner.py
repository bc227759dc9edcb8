"""String clean-up helpers for command arguments."""


def remove_commas(s: str) -> str:
    """Return ``s`` with every comma removed."""
    return s.replace(",", "")