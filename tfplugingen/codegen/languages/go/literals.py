"""
Go literal formatting.

Mirrors the output of Go's ``%q`` and ``%g`` verbs so generated schema code
matches what ``fmt.Sprintf`` would produce.
"""

import math
from decimal import Decimal

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def go_quote(value: str) -> str:
    """Return ``value`` as a double-quoted Go string literal (``%q``)."""
    out = ['"']
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x80:
                out.append(f"\\x{cp:02x}")
            elif cp < 0x10000:
                out.append(f"\\u{cp:04x}")
            else:
                out.append(f"\\U{cp:08x}")
    out.append('"')
    return "".join(out)


def go_float(value: float) -> str:
    """
    Format a float the way Go's ``%g`` verb does.

    Go uses the shortest representation that round-trips and switches to
    exponent form when the decimal exponent is below -4 or at least 6.

    Args:
        value: Number to format

    Returns:
        Go formatted number, e.g. ``1.5``, ``1e+06`` or ``1e-05``
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    prefix = "-" if sign else ""
    text = "".join(str(d) for d in digits)

    if exp < -4 or exp >= 6:
        mantissa = text[0]
        if nd > 1:
            mantissa += "." + text[1:]
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"

    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{text}"
    if dp >= nd:
        return f"{prefix}{text}{'0' * (dp - nd)}"
    return f"{prefix}{text[:dp]}.{text[dp:]}"
