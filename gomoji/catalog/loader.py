"""Catalog Loader - decode and validate a gitmoji catalog document."""

import json
import re
from pathlib import Path
from typing import Optional, Union

from gomoji.catalog.errors import (
    DEFAULT_LOCALE,
    CatalogError,
    Diagnostic,
    DiagnosticKind,
    format_message,
)
from gomoji.catalog.models import ABSENT, SEMVER_TOKENS, Catalog, Entry, Present

BUNDLED_CATALOG_PATH = Path(__file__).parent / "gitmojis.json"

ENTRIES_KEY = "gitmojis"
SCHEMA_KEY = "$schema"

# JSON key -> Entry attribute. Every key is required except "semver".
ENTRY_FIELDS = {
    "emoji": "emoji",
    "entity": "entity",
    "code": "code",
    "description": "description",
    "descEs": "desc_es",
    "name": "name",
    "semver": "semver",
}
OPTIONAL_ENTRY_FIELDS = {"semver"}
NON_EMPTY_ENTRY_FIELDS = ("emoji", "code")

_WHITESPACE = re.compile(r'[ \t\n\r]*')
_LITERALS = ("true", "false", "null")
_NUMBER_CHARS = frozenset("0123456789+-.eE")
_PARTIAL_NUMBER = re.compile(r'-|-?(?:0|[1-9][0-9]*)(?:\.[0-9]*|\.[0-9]+[eE][-+]?[0-9]*|[eE][-+]?[0-9]*)?')
_PARTIAL_ESCAPE = re.compile(r'\\u[0-9a-fA-F]{0,4}')


class _Object(list):
    """Decoded JSON object, kept as (key, value) pairs in document order."""


_DECODER = json.JSONDecoder(object_pairs_hook=_Object)


def _is_object(value) -> bool:
    return isinstance(value, _Object)


def _is_array(value) -> bool:
    return isinstance(value, list) and not isinstance(value, _Object)


_DETAILS = {
    "es": {
        "empty": "no debe estar vacío",
        "semver": "se esperaba uno de {tokens}",
    },
    "en": {
        "empty": "must not be empty",
        "semver": "expected one of {tokens}",
    },
}


def _fail(kind: DiagnosticKind, locale: str, *, offset: Optional[int] = None,
          field: Optional[str] = None, path: Optional[str] = None, detail: str = "") -> CatalogError:
    message = format_message(kind, locale, offset=offset, field=field, detail=detail)
    return CatalogError(Diagnostic(kind=kind, message=message, offset=offset, field=field, path=path))


def _detail(locale: str, key: str, **kwargs) -> str:
    details = _DETAILS.get(locale, _DETAILS[DEFAULT_LOCALE])
    return details[key].format(**kwargs)


def _skip_whitespace(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _is_truncated(text: str, err: json.JSONDecodeError) -> bool:
    """True when the decoder ran out of input rather than hitting a bad character."""
    if err.msg.startswith("Unterminated string"):
        return True
    if _skip_whitespace(text, err.pos) >= len(text):
        return True

    # Cut inside a \uXXXX escape
    if err.msg.startswith("Invalid \\uXXXX escape"):
        backslash = text.rfind('\\')
        return backslash >= err.pos - 1 and _PARTIAL_ESCAPE.fullmatch(text, backslash) is not None

    if not err.msg.startswith(("Expecting value", "Expecting ',' delimiter")):
        return False

    # Cut inside a literal: "nu", "tr", "fals"
    rest = text[err.pos:]
    if err.msg.startswith("Expecting value") and any(literal.startswith(rest) for literal in _LITERALS):
        return True

    # Cut inside a number: "-", "1.", "1e", "2.5e+"
    start = err.pos
    while start > 0 and text[start - 1] in _NUMBER_CHARS:
        start -= 1
    return _PARTIAL_NUMBER.fullmatch(text, start) is not None


def _decode_single_value(raw_text: str, locale: str):
    """Decode exactly one JSON value from raw_text."""
    if not isinstance(raw_text, str):
        raise _fail(DiagnosticKind.INTERNAL_DECODE_FAILURE, locale,
                    detail=f"expected str, got {type(raw_text).__name__}")

    start = _skip_whitespace(raw_text, 0)
    if start == len(raw_text):
        raise _fail(DiagnosticKind.EMPTY_INPUT, locale)

    try:
        value, end = _DECODER.raw_decode(raw_text, start)
    except json.JSONDecodeError as e:
        if _is_truncated(raw_text, e):
            raise _fail(DiagnosticKind.UNEXPECTED_TERMINATION, locale, offset=len(raw_text))
        raise _fail(DiagnosticKind.MALFORMED_SYNTAX, locale, offset=e.pos)
    except RecursionError:
        raise _fail(DiagnosticKind.INTERNAL_DECODE_FAILURE, locale, detail="document nested too deeply")

    trailing = _skip_whitespace(raw_text, end)
    if trailing != len(raw_text):
        raise _fail(DiagnosticKind.MULTIPLE_VALUES, locale, offset=trailing)

    return value, start


def _build_entry(obj, index: int, locale: str) -> Entry:
    where = f"{ENTRIES_KEY}[{index}]"
    if not _is_object(obj):
        raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, field=ENTRIES_KEY, path=where)

    # Every pair is checked, so a repeated key cannot hide a bad first value
    values = {}
    for key, value in obj:
        if key not in ENTRY_FIELDS:
            raise _fail(DiagnosticKind.UNKNOWN_FIELD, locale, field=key, path=f"{where}.{key}")
        if key in OPTIONAL_ENTRY_FIELDS:
            if value is not None and not isinstance(value, str):
                raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, field=key, path=f"{where}.{key}")
        elif not isinstance(value, str):
            raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, field=key, path=f"{where}.{key}")
        values[ENTRY_FIELDS[key]] = value

    for key, attr in ENTRY_FIELDS.items():
        if key not in OPTIONAL_ENTRY_FIELDS and attr not in values:
            raise _fail(DiagnosticKind.MISSING_FIELD, locale, field=key, path=f"{where}.{key}")

    for key in NON_EMPTY_ENTRY_FIELDS:
        if not values[ENTRY_FIELDS[key]]:
            raise _fail(DiagnosticKind.INVALID_VALUE, locale, field=key, path=f"{where}.{key}",
                        detail=_detail(locale, "empty"))

    semver = values.get("semver")
    if semver is None:
        values["semver"] = ABSENT
    elif semver not in SEMVER_TOKENS:
        tokens = ", ".join(repr(t) for t in SEMVER_TOKENS)
        raise _fail(DiagnosticKind.INVALID_VALUE, locale, field="semver", path=f"{where}.semver",
                    detail=_detail(locale, "semver", tokens=tokens))
    else:
        values["semver"] = Present(semver)

    return Entry(**values)


def _build_catalog(document, offset: int, locale: str) -> Catalog:
    if not _is_object(document):
        raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, offset=offset)

    schema = None
    entries = None
    for key, value in document:
        if key == SCHEMA_KEY:
            if not isinstance(value, str):
                raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, field=key, path=key)
            schema = value
        elif key == ENTRIES_KEY:
            if not _is_array(value):
                raise _fail(DiagnosticKind.TYPE_MISMATCH, locale, field=key, path=key)
            entries = tuple(_build_entry(item, i, locale) for i, item in enumerate(value))
        else:
            raise _fail(DiagnosticKind.UNKNOWN_FIELD, locale, field=key, path=key)

    if entries is None:
        raise _fail(DiagnosticKind.MISSING_FIELD, locale, field=ENTRIES_KEY, path=ENTRIES_KEY)

    return Catalog(entries=entries, schema=schema)


def load_catalog(raw_text: str, locale: str = DEFAULT_LOCALE) -> Catalog:
    """Decode raw_text into a validated Catalog.

    The document must hold exactly one JSON object with a closed schema:
    unknown keys, wrong types and missing required keys are all rejected.
    Nothing is returned on failure.

    Args:
        raw_text: The complete catalog document
        locale: Language for diagnostic messages ("es" or "en")

    Returns:
        Catalog with entries in document order

    Raises:
        CatalogError: carrying a Diagnostic that describes the first fault found
    """
    document, offset = _decode_single_value(raw_text, locale)
    return _build_catalog(document, offset, locale)


def try_load_catalog(raw_text: str, locale: str = DEFAULT_LOCALE) -> Union[Catalog, Diagnostic]:
    """Like load_catalog, but return the Diagnostic instead of raising."""
    try:
        return load_catalog(raw_text, locale)
    except CatalogError as e:
        return e.diagnostic


def load_catalog_file(path: Union[str, Path], locale: str = DEFAULT_LOCALE) -> Catalog:
    """Read a catalog document from disk. OSError propagates unchanged.

    Bytes that are not valid UTF-8 are reported as malformed syntax at their byte offset.
    """
    data = Path(path).read_bytes()
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise _fail(DiagnosticKind.MALFORMED_SYNTAX, locale, offset=e.start)
    return load_catalog(text, locale)


def load_bundled_catalog(locale: str = DEFAULT_LOCALE) -> Catalog:
    """Load the gitmoji catalog shipped with the package."""
    return load_catalog_file(BUNDLED_CATALOG_PATH, locale)
