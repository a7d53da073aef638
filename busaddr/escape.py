from __future__ import annotations

"""Percent-escape decoding for address strings.

Any byte of an address may be written as ``%`` followed by two hex digits.
Decoding runs once over the whole string and the resulting bytes must form
valid UTF-8.
"""

from busaddr.errors import MalformedEscape

_HEX_DIGITS = b"0123456789abcdefABCDEF"
_PERCENT = ord("%")


def unescape(text: str | bytes) -> str:
    """Decode every ``%XY`` escape in ``text`` and return the UTF-8 text.

    ``str`` input without any ``%`` is returned as is. Literal characters of
    ``str`` input are taken as their UTF-8 bytes, literal bytes of ``bytes``
    input as themselves. Note that a literal U+0080..U+00FF character is thus
    two bytes, not the single byte of its code point, so ``"\xe9%41"`` gives
    ``"\xe9A"``; pass ``bytes`` for byte-for-byte literals.

    Raises MalformedEscape when a ``%`` is not followed by two hex digits or
    when the decoded bytes are not valid UTF-8.
    """
    if isinstance(text, str):
        if "%" not in text:
            return text
        raw = text.encode("utf-8")
    else:
        raw = bytes(text)

    out = bytearray()
    i = 0
    while i < len(raw):
        byte = raw[i]
        if byte != _PERCENT:
            out.append(byte)
            i += 1
            continue
        digits = raw[i + 1:i + 3]
        if len(digits) != 2 or any(d not in _HEX_DIGITS for d in digits):
            bad = raw[i:i + 3].decode("utf-8", errors="replace")
            raise MalformedEscape(f"invalid escape {bad!r} at offset {i}", offset=i)
        out.append(int(digits, 16))
        i += 3

    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedEscape(
            f"unescaped address is not valid UTF-8 ({exc.reason} at byte {exc.start})",
            offset=exc.start,
        ) from exc
