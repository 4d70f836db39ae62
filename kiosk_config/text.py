"""String helpers used when embedding launch arguments into exported XML."""

from __future__ import annotations

_XML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&apos;",
    '"': "&quot;",
}


def escape_xml(value: str | None) -> str:
    if value is None:
        return ""
    return "".join(_XML_ESCAPES.get(c, c) for c in value)


def escape_attr(value: object) -> str:
    if value is None:
        return ""
    return str(value).replace("&", "&amp;").replace('"', "&quot;").replace("'", "&#39;")


def truncate(value: str | None, length: int) -> str:
    if not value:
        return ""
    return value[: max(length - 3, 0)] + "..." if len(value) > length else value
