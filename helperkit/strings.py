"""String sanitising, trimming, templating and conversion helpers.

Every helper takes the string as its first argument and returns a new value;
inputs are never mutated. `None` is accepted wherever the docstring says so
and is otherwise treated as a caller bug.
"""

from __future__ import annotations

import io
import re
import unicodedata
from collections.abc import Mapping

# Characters rejected in file names on the most restrictive common platform.
_INVALID_FILE_NAME_CHARS = frozenset('"<>|:*?\\/' + "".join(chr(i) for i in range(32)))

_CSS_INVALID_RE = re.compile(r"[^_a-zA-Z0-9-]")
_SEO_INVALID_RE = re.compile(r"[^a-z0-9-]")
_DASH_RUN_RE = re.compile(r"-+")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_WHITESPACE_RE = re.compile(r"\s+")
_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")
_ENCODED_INDEX_RE = re.compile(r"%7B(\d+)%7D", re.IGNORECASE)


# region Sanitise
def to_file_name(s: str) -> str:
    """Strip invalid characters and inner periods, and turn spaces into underscores."""
    cleaned = "".join(ch for ch in s if ch not in _INVALID_FILE_NAME_CHARS)
    # A leading period starts the extension, so ".bashrc" survives intact.
    dot = cleaned.rfind(".")
    stem, ext = (cleaned[:dot], cleaned[dot:]) if dot >= 0 else (cleaned, "")
    return (stem.replace(".", "") + ext).replace(" ", "_")


def to_css_class(s: str) -> str:
    out = s.replace(" ", "-").replace("_", "-")
    out = _CSS_INVALID_RE.sub("", out)
    while len(out) < 2:
        out = "_" + out
    if out[0].isdigit():
        out = "_" + out
    return out.lower()


def to_seo_url(s: str, strip_dashes: bool = False) -> str:
    """Lower-case, dash-separated slug; `strip_dashes` removes the dashes as well."""
    out = s.strip().lower()
    out = out.replace(" ", "-").replace("&", "and")
    out = _SEO_INVALID_RE.sub("", out)
    out = _DASH_RUN_RE.sub("-", out)
    if strip_dashes:
        out = out.replace("-", "")
    return out


def to_alpha_numeric(s: str) -> str:
    return _NON_ALNUM_RE.sub("", s)


def to_alpha(s: str) -> str:
    return _NON_ALPHA_RE.sub("", s)


def to_numeric(s: str) -> str:
    return _NON_DIGIT_RE.sub("", s)


def exclude_punctuations(source: str | None) -> str | None:
    """Drop punctuation and symbol characters, then all spaces.

    Blank input is returned unchanged.
    """
    if source is None or not source.strip():
        return source
    spaced = "".join(
        " " if unicodedata.category(ch)[0] in ("P", "S") else ch for ch in source
    )
    return remove_spaces(spaced)
# endregion


# region Truncate / Trim
def truncate(s: str | None, max_length: int) -> str | None:
    if not s:
        return s
    return s[:max_length] if len(s) > max_length else s


def truncate_with(s: str | None, max_length: int, suffix: str, buffer: int = 0) -> str | None:
    """Cut to `max_length` and append `suffix`, but only once `s` exceeds max_length + buffer."""
    if not s:
        return s
    if len(s) > max_length + buffer:
        return s[:max_length] + suffix
    return s


def trim_excess_white_spaces(source: str | None) -> str | None:
    if source is None or not source.strip():
        return source
    return _WHITESPACE_RE.sub(" ", source).strip()


def trim_start(target: str, prefix: str) -> str:
    out = target
    while prefix and out.startswith(prefix):
        out = out[len(prefix):]
    return out


def trim_end(target: str, suffix: str) -> str:
    out = target
    while suffix and out.endswith(suffix):
        out = out[: -len(suffix)]
    return out


def trim_between(s: str, start: str, end: str) -> str:
    """Repeatedly remove the span from the first `start` to the first `end` (inclusive)."""
    out = s
    while True:
        start_pos = out.find(start)
        end_pos = out.find(end)
        if start_pos < 0 or end_pos < 0 or end_pos <= start_pos:
            return out
        out = out[:start_pos] + out[end_pos + len(end):]


def remove_spaces(value: str | None) -> str:
    return value.replace(" ", "") if value else ""
# endregion


# region Format / Transform / Replace
def format_with(fmt: str, *args: object) -> str:
    """`str.format` with positional args; URL-encoded `%7B0%7D` placeholders are accepted."""
    decoded = _ENCODED_INDEX_RE.sub(lambda m: "{" + m.group(1) + "}", fmt)
    return decoded.format(*args)


def format_if_not_none(fmt: str, value: object | None) -> str:
    if value is None or value == "":
        return ""
    return fmt.format(value)


def transform_with(s: str, mapping: Mapping[str, object], remove_unused: bool = False) -> str:
    """Replace `{key}` (and `%7Bkey%7D`) placeholders with values from `mapping`.

    `None` values render as an empty string. With `remove_unused`, placeholders
    left without a value are dropped.
    """
    out = s
    for key, value in mapping.items():
        text = "" if value is None else str(value)
        out = out.replace("{" + key + "}", text)
        out = out.replace("%7B" + key + "%7D", text)
    if remove_unused:
        out = trim_between(out, "{", "}")
    return out


def format_with_mask(value: str | None, mask: str, placeholder: str = "#") -> str | None:
    """Lay `value` into `mask`, one character per placeholder.

    Example: format_with_mask("0412345678", "#### ### ###") -> "0412 345 678".
    Placeholders left over once `value` runs out are dropped.
    """
    if not value:
        return value
    out: list[str] = []
    idx = 0
    for ch in mask:
        if ch == placeholder:
            if idx < len(value):
                out.append(value[idx])
                idx += 1
        else:
            out.append(ch)
    return "".join(out)


def replace_ignore_case(s: str, old: str, new: str) -> str:
    if not old:
        return s
    return re.sub(re.escape(old), lambda _m: new, s, flags=re.IGNORECASE)


def replace_any(s: str, chars: str, replacement: str = "") -> str:
    """Replace every occurrence of any character in `chars` with `replacement`."""
    if not chars:
        return s
    pattern = "[" + "".join(re.escape(ch) for ch in chars) + "]"
    return re.sub(pattern, lambda _m: replacement, s)


def reverse_words(source: str | None) -> str | None:
    if source is None or not source.strip():
        return source
    return " ".join(reversed(source.split()))


def mask(s: str | None, char: str = "X", start_from: int = 0, end_from: int = 4) -> str | None:
    """Mask characters from `start_from`, leaving the last `end_from` visible."""
    if not s:
        return s
    last = len(s) - end_from - 1
    return "".join(
        char if start_from <= i <= last else ch for i, ch in enumerate(s)
    )


def repeat(s: str, count: int) -> str:
    if count <= 0:
        return ""
    return s * count
# endregion


# region Convert
def split_by_uppercase(s: str) -> str:
    """Insert a space before each capitalised word and around digit runs."""
    tokens: list[str] = []
    i = 0
    n = len(s)
    while i < n:
        j = i + 1
        if s[i].isdecimal():
            while j < n and s[j].isdecimal():
                j += 1
        elif not s[i].isupper():
            while j < n and not s[j].isupper():
                j += 1
        else:
            while j < n and s[j].isupper():
                j += 1
            while j < n and s[j].islower():
                j += 1
        tokens.append(s[i:j])
        i = j
    return " ".join(tokens).rstrip(" ")


def to_sentence_case(s: str, split_by_upper: bool = False) -> str:
    text = split_by_uppercase(s) if split_by_upper else s
    if not text:
        return text
    return text[0] + text[1:].lower()


def capitalise(s: str | None, all_words: bool = False) -> str | None:
    if not s:
        return s
    if all_words:
        return " ".join(word[:1].upper() + word[1:] for word in s.split(" "))
    return s[:1].upper() + s[1:]


def to_stream(s: str | None, encoding: str = "utf-8") -> io.BytesIO:
    return io.BytesIO((s or "").encode(encoding))


def independent_hash_code(value: str | None) -> int | None:
    """Process-independent 32-bit hash over UTF-16 code units (seed 23, multiplier 31)."""
    if value is None:
        return None
    raw = value.encode("utf-16-le")
    h = 23
    for i in range(0, len(raw), 2):
        h = (h * 31 + (raw[i] | (raw[i + 1] << 8))) & 0xFFFFFFFF
    return h - 0x100000000 if h >= 0x80000000 else h


def default_to(source: object | None, *defaults: str | None) -> str | None:
    """Return `source` as text, or the first non-empty default.

    Empty or `None` input with no usable default is returned unchanged.
    """
    text = None if source is None else str(source)
    if text:
        return text
    for candidate in defaults:
        if candidate:
            return candidate
    return text


def to_utf8_bytes(s: str) -> bytes:
    return s.encode("utf-8")


def hex_to_bytes(hex_string: str | None) -> bytes | None:
    if not hex_string:
        return None
    if len(hex_string) % 2 or not _HEX_RE.match(hex_string):
        raise ValueError(f"not a valid hex string: {hex_string!r}")
    return bytes.fromhex(hex_string)
# endregion


# region Null / empty helpers
def join_if_not_empty(separator: str, *values: str | None) -> str:
    return separator.join(v for v in values if v)


def is_all_none_or_empty(*values: str | None) -> bool:
    return not any(values)


def value_or_empty(value: str | None) -> str:
    return value if value else ""


def value_or_replacement(value: str | None, replacement: str = "") -> str:
    return value if value else replacement


def contains_ignore_case(source: str | None, to_check: str) -> bool:
    if source is None:
        return False
    return to_check.casefold() in source.casefold()
# endregion
