"""
Character escaping for HTML/XML output.
"""

_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
}


def escape(value: str, quote: bool = False) -> str:
    """
    Escape text for inclusion in markup.

    ``&``, ``<`` and ``>`` become entity references, ``"`` too when
    ``quote`` is set (attribute values), and any character from DEL (127)
    upwards becomes a numeric character reference.
    """
    out = []
    for char in value:
        replacement = _ESCAPES.get(char)
        if replacement is not None:
            out.append(replacement)
        elif quote and char == '"':
            out.append('&quot;')
        elif ord(char) < 127:
            out.append(char)
        else:
            out.append(f"&#{ord(char)};")
    return "".join(out)
