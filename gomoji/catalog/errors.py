"""Catalog Diagnostics - typed failures reported by the catalog loader."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    """Closed set of reasons a catalog document can be rejected.

    Declared in detection priority order.
    """
    MALFORMED_SYNTAX = "malformed_syntax"
    UNEXPECTED_TERMINATION = "unexpected_termination"
    TYPE_MISMATCH = "type_mismatch"
    EMPTY_INPUT = "empty_input"
    UNKNOWN_FIELD = "unknown_field"
    MULTIPLE_VALUES = "multiple_values"
    INTERNAL_DECODE_FAILURE = "internal_decode_failure"
    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"


DEFAULT_LOCALE = "es"

# Message templates per locale. Placeholders: offset, field, detail
MESSAGES = {
    "es": {
        DiagnosticKind.MALFORMED_SYNTAX: "el texto contiene JSON mal formado (en el carácter {offset})",
        DiagnosticKind.UNEXPECTED_TERMINATION: "el texto contiene JSON mal formado: fin inesperado del texto",
        DiagnosticKind.TYPE_MISMATCH: "el texto contiene un tipo JSON incorrecto para el campo `{field}`",
        DiagnosticKind.EMPTY_INPUT: "el texto no debe estar vacío",
        DiagnosticKind.UNKNOWN_FIELD: "el texto contiene una clave desconocida `{field}`",
        DiagnosticKind.MULTIPLE_VALUES: "el texto sólo debe contener un único valor JSON (en el carácter {offset})",
        DiagnosticKind.INTERNAL_DECODE_FAILURE: "decodificación inválida: {detail}",
        DiagnosticKind.MISSING_FIELD: "falta el campo obligatorio `{field}`",
        DiagnosticKind.INVALID_VALUE: "valor inválido para el campo `{field}`: {detail}",
    },
    "en": {
        DiagnosticKind.MALFORMED_SYNTAX: "the text contains malformed JSON (at character {offset})",
        DiagnosticKind.UNEXPECTED_TERMINATION: "the text contains malformed JSON: unexpected end of input",
        DiagnosticKind.TYPE_MISMATCH: "the text contains an incorrect JSON type for field `{field}`",
        DiagnosticKind.EMPTY_INPUT: "the text must not be empty",
        DiagnosticKind.UNKNOWN_FIELD: "the text contains an unknown key `{field}`",
        DiagnosticKind.MULTIPLE_VALUES: "the text must contain a single JSON value (at character {offset})",
        DiagnosticKind.INTERNAL_DECODE_FAILURE: "invalid decode: {detail}",
        DiagnosticKind.MISSING_FIELD: "missing required field `{field}`",
        DiagnosticKind.INVALID_VALUE: "invalid value for field `{field}`: {detail}",
    },
}

# Used when a type mismatch has no field name to point at
_TYPE_MISMATCH_AT_OFFSET = {
    "es": "el texto contiene un tipo JSON incorrecto (en el carácter `{offset}`)",
    "en": "the text contains an incorrect JSON type (at character `{offset}`)",
}

SUPPORTED_LOCALES = set(MESSAGES)


def format_message(kind: DiagnosticKind, locale: str = DEFAULT_LOCALE, *, offset: Optional[int] = None,
                   field: Optional[str] = None, detail: str = "") -> str:
    """Render the localized message for a diagnostic kind."""
    if locale not in MESSAGES:
        locale = DEFAULT_LOCALE
    if kind is DiagnosticKind.TYPE_MISMATCH and not field:
        template = _TYPE_MISMATCH_AT_OFFSET[locale]
    else:
        template = MESSAGES[locale][kind]
    return template.format(offset=offset, field=field, detail=detail)


@dataclass(frozen=True)
class Diagnostic:
    """Why a catalog document was rejected."""
    kind: DiagnosticKind
    message: str
    offset: Optional[int] = None  # character offset into the raw text
    field: Optional[str] = None   # bare field name, e.g. "code"
    path: Optional[str] = None    # location in the document, e.g. "gitmojis[0].code"

    def __str__(self) -> str:
        return self.message


class CatalogError(Exception):
    """Raised when a catalog document cannot be loaded."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def kind(self) -> DiagnosticKind:
        return self.diagnostic.kind
