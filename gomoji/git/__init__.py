"""Git Operations Package"""

from gomoji.git.runner import GitRunner, GitError, GitResult

__all__ = [
    "GitRunner",
    "GitError",
    "GitResult",
]
