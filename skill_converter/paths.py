from __future__ import annotations

from typing import List


def escape_segment(segment: str, sep: str = '.') -> str:
    """Escape a single segment so it survives joining on `sep`.

    - The separator is escaped as '\\<sep>' so values like 'a|b' stay one segment.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace(sep, '\\' + sep)


def unescape_segment(segment: str) -> str:
    if segment is None:
        return ''
    out: List[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == '\\' and i + 1 < len(segment):
            out.append(segment[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return ''.join(out)


def split_escaped(text: str, sep: str) -> List[str]:
    """Split on unescaped `sep` and unescape each segment. Empty segments are kept."""
    if text is None:
        return []
    if not isinstance(text, str):
        text = str(text)

    parts: List[str] = []
    buf: List[str] = []
    escaping = False

    for ch in text:
        if escaping:
            # Keep the escape pair so unescape_segment can process it.
            buf.append('\\')
            buf.append(ch)
            escaping = False
            continue

        if ch == '\\':
            escaping = True
            continue
        if ch == sep:
            parts.append(unescape_segment(''.join(buf)))
            buf = []
            continue
        buf.append(ch)

    if escaping:
        # Trailing backslash; treat as literal.
        buf.append('\\')

    parts.append(unescape_segment(''.join(buf)))
    return parts


def join_path(*segments: str) -> str:
    return '.'.join(s for s in segments if s)
