"""String grammars for identifiers, paths and JSON-LD literals.

Every predicate is total: it returns ``False`` for values of the wrong
type instead of raising.  :func:`require` turns a failed predicate into
a :class:`~hydra_ld.errors.GrammarViolation` naming the field.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Callable, Sequence
from urllib.parse import urlsplit

from hydra_ld.errors import GrammarViolation
from hydra_ld.namespaces import XSD


LOCAL_BASE = "http://localhost/"

URL_SCHEMES = ("http", "https", "ftp")

_ESCAPE = r"%[0-9A-Fa-f]{2}"

_PATH_COMPONENT_RE = re.compile(
    rf"^(?:[a-zA-Z0-9\-._~!$&'()*+,;=:]|{_ESCAPE})+$"
)

# pchar plus the braces used by URI template placeholders such as {id}
_PCHAR = rf"(?:[a-zA-Z0-9\-._~!$&'()*+,;=:@{{}}]|{_ESCAPE})"

_URI_REFERENCE_RE = re.compile(
    rf"""^
    (?:(?P<scheme>[a-zA-Z][a-zA-Z0-9+.\-]*):)?
    (?://
        (?:(?P<userinfo>(?:[a-zA-Z0-9\-._~!$&'()*+,;=:]|{_ESCAPE})*)@)?
        (?P<host>\[[0-9A-Fa-f:.]+\]|(?:[a-zA-Z0-9\-._~!$&'()*+,;=]|{_ESCAPE})*)
        (?::(?P<port>\d*))?
    )?
    (?P<path>(?:{_PCHAR}|/)*)
    (?:\?(?P<query>(?:{_PCHAR}|[/?])*))?
    (?:\#(?P<fragment>(?:{_PCHAR}|[/?])*))?
    $""",
    re.VERBOSE,
)

_HOST_RE = re.compile(
    r"^(?=.{1,253}$)[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?)*\.?$"
)
_IPV6_RE = re.compile(r"^[0-9A-Fa-f:.]+$")
_URL_PATH_RE = re.compile(
    rf"^(?:[\w\-:@&=+,.!/~*'$;(){{}}]|{_ESCAPE})*$"
)
_SUFFIX_RE = re.compile(r"[?#]")
_WHITESPACE_RE = re.compile(r"[\s\x00-\x1f\x7f]")
_LANGUAGE_RE = re.compile(r"^[a-zA-Z]{1,8}(?:-[a-zA-Z0-9]{1,8})*$")
_VARIABLE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")

XSD_STRING = f"{XSD}string"


# ── Paths ──────────────────────────────────────────────────────────


def is_path_component(value: Any) -> bool:
    """A single non-empty path segment (no ``/``)."""
    return isinstance(value, str) and bool(_PATH_COMPONENT_RE.fullmatch(value))


def _segments(path: str) -> list[str]:
    # a trailing separator does not introduce an empty segment
    parts = path.split("/")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def _strip_suffix(path: str) -> str:
    return _SUFFIX_RE.split(path, 1)[0]


def is_relative_path(value: Any) -> bool:
    """``users/1`` style paths; never starting with ``/`` or ``#``."""
    if not isinstance(value, str) or not value:
        return False
    if value[0] in "/#":
        return False
    parts = _segments(_strip_suffix(value))
    return bool(parts) and all(is_path_component(part) for part in parts)


def is_absolute_path(value: Any) -> bool:
    """``/users/1``, ``#users`` or ``#/users/1`` style paths.

    A query string or fragment is dropped before segment validation and
    never validated itself.  ``"/"`` alone is rejected: at least one segment
    must remain after the leading separator.
    """
    if not isinstance(value, str) or not value:
        return False
    if value[0] not in "/#":
        return False
    path = _strip_suffix(value[1:] if value[0] == "#" else value)
    parts = _segments(path)
    if path.startswith("/"):
        parts = parts[1:]
    return bool(parts) and all(is_path_component(part) for part in parts)


def is_path(value: Any) -> bool:
    return is_relative_path(value) or is_absolute_path(value)


@dataclass(frozen=True)
class PathVariable:
    """Named placeholder in a route, e.g. ``PathVariable("user_id")``."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _VARIABLE_NAME_RE.fullmatch(self.name):
            raise GrammarViolation(
                "name", "path-variable",
                f"Invalid path variable name: {self.name!r}", self.name,
            )

    def __str__(self) -> str:
        return f"{{{self.name}}}"


def is_path_variable(value: Any) -> bool:
    return isinstance(value, PathVariable)


def is_route(value: Any) -> bool:
    """A non-empty sequence of paths and path variables."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    if len(value) == 0:
        return False
    return all(is_path(part) or is_path_variable(part) for part in value)


# ── URIs ───────────────────────────────────────────────────────────


def is_uri(value: Any) -> bool:
    """Absolute URI or site-relative reference usable as an identifier.

    Two independent checks must both pass: the RFC 3986 URI-reference
    grammar, and URL validity either of the value itself or of the value
    relativized against :data:`LOCAL_BASE`.
    """
    if not isinstance(value, str) or not value:
        return False
    if not _URI_REFERENCE_RE.fullmatch(value):
        return False
    if _is_valid_url(value):
        return True
    relative = (LOCAL_BASE + value).replace(LOCAL_BASE + "/", LOCAL_BASE, 1)
    return _is_valid_url(relative)


def _is_valid_url(value: str) -> bool:
    if _WHITESPACE_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in URL_SCHEMES:
        return False
    host = parts.hostname
    if not host:
        return False
    if ":" in host:
        if not _IPV6_RE.fullmatch(host):
            return False
    elif not _HOST_RE.fullmatch(host):
        return False
    if port is not None and not 0 <= port <= 65535:
        return False
    path = parts.path
    if "//" in path or ".." in path.split("/"):
        return False
    return bool(_URL_PATH_RE.fullmatch(path))


def is_curie(value: Any) -> bool:
    """``prefix:suffix`` with both sides non-empty."""
    if not isinstance(value, str):
        return False
    prefix, sep, suffix = value.partition(":")
    return bool(prefix and sep and suffix)


def is_term(value: Any) -> bool:
    return is_uri(value) or is_curie(value)


def is_identifier(value: Any) -> bool:
    """Values accepted as an entity ``@id``: a URI or a path."""
    return is_uri(value) or is_path(value)


# ── Literals ───────────────────────────────────────────────────────


def expand_datatype(value: str) -> str:
    return value.replace("xsd:", XSD, 1) if value.startswith("xsd:") else value


def is_datatype(value: Any) -> bool:
    """An XML Schema datatype IRI (``xsd:`` CURIEs are expanded first)."""
    if not isinstance(value, str) or not value:
        return False
    iri = expand_datatype(value)
    return iri.startswith(XSD) and len(iri) > len(XSD) and is_uri(iri)


def is_jsonld_literal(value: Any) -> bool:
    """A JSON-LD value object: ``{"@value": ..., "@type"?: ..., "@language"?: ...}``.

    A language tag is only allowed on untyped or ``xsd:string`` literals.
    """
    if not isinstance(value, dict):
        return False
    if not set(value) <= {"@value", "@type", "@language"}:
        return False
    raw = value.get("@value")
    if raw is None or not isinstance(raw, (str, bool, int, float)):
        return False
    datatype = value.get("@type")
    if datatype is not None and not is_datatype(datatype):
        return False
    language = value.get("@language")
    if language is not None:
        if not isinstance(language, str) or not _LANGUAGE_RE.fullmatch(language):
            return False
        if datatype is not None and expand_datatype(datatype) != XSD_STRING:
            return False
    return True


def is_link(value: Any) -> bool:
    """A node reference ``{"@id": <uri or path>}``."""
    return (
        isinstance(value, dict)
        and set(value) == {"@id"}
        and is_identifier(value["@id"])
    )


# ── Enforcement ────────────────────────────────────────────────────


def require(
    predicate: Callable[[Any], bool],
    value: Any,
    path: str,
    constraint: str,
) -> None:
    """Raise :class:`GrammarViolation` unless ``predicate(value)`` holds."""
    if not predicate(value):
        raise GrammarViolation(
            path, constraint,
            f"{value!r} does not satisfy the {constraint} grammar",
            value,
        )
