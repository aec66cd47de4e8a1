"""Git Runner - hand a composed message to git."""

import subprocess
from dataclasses import dataclass


@dataclass
class GitResult:
    """Outcome of a git invocation."""
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class GitError(Exception):
    """Raised when git cannot be run at all."""
    pass


class GitRunner:
    """Runs git commands in the current directory."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> GitResult:
        """Run a git command. A non-zero exit is reported, not raised."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git {' '.join(args)}: {e}")
        return GitResult(stdout=result.stdout, stderr=result.stderr, exit_code=result.returncode)

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        if not self._run_git('--version').ok:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        if not self._run_git('rev-parse', '--git-dir').ok:
            raise GitError("Not inside a git repository")

    def commit(self, args: list[str]) -> GitResult:
        """Run `git <args>`, e.g. the output of CommitMessage.git_args()."""
        return self._run_git(*args)
