import re
from collections.abc import Iterable

_SPACE_RE = re.compile(r"\s+")
_FILLER_RE = re.compile(r"^(?:to|and|also|please)\b\s*|\s*\b(?:to|and|also|please)$", re.IGNORECASE)
_EDGE_PUNCT = " \t:;,.-"


def normalize_space(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()


def remove_spans(text: str, spans: Iterable[tuple[int, int]]) -> str:
    """Cut the given (start, end) ranges out of text; overlapping ranges are merged."""
    merged: list[list[int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])

    out, pos = [], 0
    for start, end in merged:
        out.append(text[pos:start])
        out.append(" ")
        pos = end
    out.append(text[pos:])
    return "".join(out)


def strip_fillers(text: str) -> str:
    """Drop surrounding punctuation and leading/trailing filler words until stable."""
    prev = None
    while prev != text:
        prev = text
        text = normalize_space(text).strip(_EDGE_PUNCT)
        text = _FILLER_RE.sub("", text)
    return text


def capitalize_first(text: str) -> str:
    # all-caps input is kept as-is so acronyms survive
    if not text:
        return text
    if len(text) > 1 and text == text.upper():
        return text
    return text[0].upper() + text[1:]
