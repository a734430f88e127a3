"""Git hash capture with dirty-tree detection, recorded alongside null networks."""

import subprocess


def _git(*args: str) -> str:
    return subprocess.check_output(
        ["git", *args], stderr=subprocess.DEVNULL
    ).decode().strip()


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed with '-dirty' when there are uncommitted changes.

    Returns "unknown" outside a git repository or when git is unavailable.
    """
    try:
        sha = _git("rev-parse", "--short", "HEAD")
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"

    # Unstaged first, then staged
    for diff_args in (("diff", "--quiet"), ("diff", "--quiet", "--cached")):
        try:
            _git(*diff_args)
        except subprocess.CalledProcessError:
            return sha + "-dirty"
    return sha
