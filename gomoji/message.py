"""Commit Message Composition"""

from dataclasses import dataclass, field

from gomoji import SCOPES
from gomoji.catalog import Catalog

MIN_SUBJECT_LENGTH = 3
MAX_SUBJECT_LENGTH = 50


class MessageError(ValueError):
    """Raised when user input cannot form a commit message."""
    pass


@dataclass
class Intents:
    """Selection list built from a catalog: labels and codes share indexes."""
    labels: list[str] = field(default_factory=list)
    codes: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.codes)


@dataclass
class CommitMessage:
    intent: str
    scope: str
    subject: str
    body: list[str] = field(default_factory=list)

    @property
    def header(self) -> str:
        return f"{self.intent} [{self.scope}] {self.subject}"

    def lines(self) -> list[str]:
        """Header, then a blank line and the body if there is one."""
        if not self.body:
            return [self.header]
        return [self.header, ""] + self.body

    def git_args(self) -> list[str]:
        """Arguments for `git commit`: one -m per paragraph."""
        args = ['commit', '-m', self.header]
        for line in self.body:
            args.extend(['-m', line])
        return args

    def __str__(self) -> str:
        return '\n'.join(self.lines())


def get_intents(catalog: Catalog) -> Intents:
    """Build the intent selection list in catalog order."""
    return Intents(
        labels=[entry.label for entry in catalog],
        codes=[entry.code for entry in catalog],
    )


def scope_labels() -> list[str]:
    return [f"{name} - {desc}" for name, desc in SCOPES.items()]


def validate_subject(subject: str, min_length: int = MIN_SUBJECT_LENGTH,
                     max_length: int = MAX_SUBJECT_LENGTH) -> str:
    """Return the subject if its length (in characters) is within bounds."""
    length = len(subject)
    if length < min_length or length > max_length:
        raise MessageError(f"el asunto debe tener entre {min_length} y {max_length} caracteres")
    return subject


def clean_body(lines: list[str]) -> list[str]:
    """Trim every body line, dropping trailing blank lines."""
    cleaned = [line.strip() for line in lines]
    while cleaned and not cleaned[-1]:
        cleaned.pop()
    return cleaned


def compose_message(catalog: Catalog, code: str, scope: str, subject: str, body: list[str] | None = None,
                    min_length: int = MIN_SUBJECT_LENGTH, max_length: int = MAX_SUBJECT_LENGTH) -> CommitMessage:
    """Validate the selections and build the commit message."""
    if catalog.by_code(code) is None:
        raise MessageError(f"código de emoji desconocido: {code}")
    if scope not in SCOPES:
        raise MessageError(f"ámbito desconocido: {scope}")
    subject = validate_subject(subject.strip(), min_length, max_length)
    return CommitMessage(intent=code, scope=scope, subject=subject, body=clean_body(body or []))


def draw_ruler(size: int) -> str:
    """Two-line column ruler shown above the subject prompt."""
    numbers = []
    ticks = []
    for i in range(0, size, 10):
        numbers.append(f"{i + 10:10d}")
        ticks.append("┄" * 9 + "┼")

    number_line = ''.join(numbers)
    tick_line = ''.join(ticks)
    if number_line:
        number_line = '0' + number_line[1:]
        tick_line = '├' + tick_line[1:-1] + '┤'

    return f"╔══╗{number_line}\n╚══╝{tick_line}"
