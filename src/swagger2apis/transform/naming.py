"""Identifier helpers shared by the resolver, interface builder and renderer.

Interface names must come out of a single function so that a ``$ref`` and the
definition it points at always agree on the generated name.
"""

import re
import unicodedata

from pypinyin import Style, lazy_pinyin

INTERFACE_PREFIX = "I"

_SPECIAL_CHARS = re.compile(r"[^\w]")
_HAN_RUN = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff]+")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def remove_special_characters(text: str) -> str:
    """Drop everything that is not a letter, digit or underscore.

    Non-ASCII letters (CJK included) survive; use ``romanize`` to turn them
    into ASCII.
    """
    return _SPECIAL_CHARS.sub("", text)


def romanize(text: str) -> str:
    """Transliterate to ASCII: Han characters become capitalized pinyin.

    Accented Latin letters lose their accents, anything else non-ASCII is
    dropped.
    """
    parts = []
    last = 0
    for match in _HAN_RUN.finditer(text):
        parts.append(text[last:match.start()])
        syllables = lazy_pinyin(match.group(), style=Style.NORMAL)
        parts.append("".join(s.capitalize() for s in syllables))
        last = match.end()
    parts.append(text[last:])

    decomposed = unicodedata.normalize("NFKD", "".join(parts))
    return decomposed.encode("ascii", "ignore").decode("ascii")


def interface_name(raw_name: str) -> str:
    """Derive the interface name for a definition name or reference segment.

    ``"User"`` -> ``"IUser"``, ``"用户DTO"`` -> ``"IYongHuDTO"``,
    ``"Map«string,Item»"`` -> ``"IMapstringItem"``, ``""`` -> ``"I"``.
    """
    cleaned = romanize(remove_special_characters(str(raw_name)))
    return INTERFACE_PREFIX + _NON_IDENTIFIER.sub("", cleaned)


def ref_segment(ref: str) -> str:
    """Return the definition name a ``$ref`` points at."""
    if "/definitions/" in ref:
        return ref.rsplit("/definitions/", 1)[1]
    return ref.rsplit("/", 1)[-1]


def first_upper(text: str) -> str:
    return text[:1].upper() + text[1:]
