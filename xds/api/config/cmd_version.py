"""Version command - returns XDS version information."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...constants import API_VERSION
from ..StageResult import StageResult
from .._output_schemas.config import ConfigVersionOutput
from .get_package_version import get_package_version


def get_git_sha() -> str:
    """Short git SHA of the source checkout, empty string outside a checkout."""
    try:
        project_root = Path(__file__).resolve().parents[3]
        sha_output = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
            cwd=str(project_root),
        )
    except (OSError, subprocess.CalledProcessError):
        return ""
    return sha_output.decode().strip()


def cmd_version() -> StageResult:
    """Get XDS version information.

    Returns:
        StageResult with version information
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        git_sha = get_git_sha()

        yield (1.0, "Complete")
        full_version = f"{version} ({git_sha})" if git_sha else version

        result_obj.result = f"XDS version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            api_version=API_VERSION,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
