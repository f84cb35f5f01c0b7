"""
Git client infrastructure for cratos.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import os
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

from ..domain import VCS_DIR
from ..exit_codes import VcsError

logger = logging.getLogger(__name__)

# "## " in front of the branch description
BRANCH_PREFIX_LENGTH = 3


@dataclass(frozen=True)
class GitStatusOutput:
    """Porcelain status split into the branch annotation and file entries."""
    branch_line: str
    files: Tuple[str, ...] = ()

    @property
    def branch(self) -> str:
        """Branch description without the leading '## '."""
        return self.branch_line[BRANCH_PREFIX_LENGTH:]

    @classmethod
    def parse(cls, stdout: str) -> "GitStatusOutput":
        lines = stdout.rstrip('\n').split('\n')
        return cls(branch_line=lines[0], files=tuple(lines[1:]))


class GitClient:
    """
    Abstraction over git commands.

    Example:
        client = GitClient()
        status = client.status_porcelain("/path/to/module")
        print(status.branch)
    """

    def __init__(self, timeout: Optional[float] = 30):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds (None waits forever)
        """
        self.timeout = timeout

    def _run(self, args: List[str], path: str) -> str:
        """
        Run git against the repository at path and return stdout.

        Raises:
            VcsError: On non-zero exit (message is git's stderr), timeout,
                or a missing git executable
        """
        cmd = [
            "git",
            f"--git-dir={os.path.join(path, VCS_DIR)}",
            f"--work-tree={path}",
            *args,
        ]
        logger.debug(f"Running command in '{path}': {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                # undecodable bytes (e.g. latin-1 branch names) become U+FFFD
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            raise VcsError(f"git timed out after {self.timeout}s: {' '.join(args)}", path=path)
        except FileNotFoundError as e:
            raise VcsError(f"git executable not found: {e}", path=path)

        if result.returncode != 0:
            raise VcsError(result.stderr.rstrip("\n"), path=path)
        return result.stdout

    def status_porcelain(self, path: str) -> GitStatusOutput:
        """
        Get short, porcelain, branch-annotated status.

        Args:
            path: Path to the module directory

        Returns:
            GitStatusOutput with the branch line and one entry per file
        """
        stdout = self._run(["status", "--porcelain", "--branch"], path)
        return GitStatusOutput.parse(stdout)
