"""Catalog Models - gitmoji entries and the ordered catalog."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional, Union

# Version bump classes an entry may declare. "" is a declared "no bump".
SEMVER_TOKENS = ("major", "minor", "patch", "")


@dataclass(frozen=True)
class Absent:
    """The entry declares no version semantics (key missing or null)."""

    @property
    def bump(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Present:
    """The entry declares version semantics explicitly."""
    value: str

    @property
    def bump(self) -> Optional[str]:
        return self.value or None


Semver = Union[Absent, Present]

ABSENT = Absent()


@dataclass(frozen=True)
class Entry:
    """One selectable commit intent."""
    emoji: str
    entity: str
    code: str
    description: str
    desc_es: str
    name: str
    semver: Semver = ABSENT

    @property
    def label(self) -> str:
        """On-screen label: glyph plus localized description."""
        return f"{self.emoji} - {self.desc_es}"


@dataclass(frozen=True)
class Catalog:
    """Immutable, ordered collection of entries in document order."""
    entries: tuple[Entry, ...] = ()
    schema: Optional[str] = None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    def codes(self) -> list[str]:
        return [entry.code for entry in self.entries]

    def by_code(self, code: str) -> Optional[Entry]:
        """First entry with the given code, or None. Case-sensitive."""
        return next((entry for entry in self.entries if entry.code == code), None)

    def duplicate_codes(self) -> list[str]:
        """Codes that appear more than once, in order of first appearance."""
        counts = Counter(self.codes())
        return [code for code in dict.fromkeys(self.codes()) if counts[code] > 1]
