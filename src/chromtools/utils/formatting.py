from __future__ import annotations

from typing import Sequence


def _monomial(power: int) -> str:
    if power == 0:
        return ""
    if power == 1:
        return "x"
    return f"x^{power}"


def format_polynomial(coefficients: Sequence[int], *, offset: int = 1) -> str:
    """Plain-text form of sum(coefficients[k] * x^(k + offset)), highest power first.

    Examples: [2, -3, 1] -> "x^3 - 3x^2 + 2x", [] -> "0".
    """
    terms: list[str] = []
    for k in range(len(coefficients) - 1, -1, -1):
        c = coefficients[k]
        if c == 0:
            continue
        power = k + offset
        mono = _monomial(power)
        mag = abs(c)
        body = mono if (mag == 1 and mono) else f"{mag}{mono}"
        if not terms:
            terms.append(body if c > 0 else f"-{body}")
        else:
            terms.append(f"+ {body}" if c > 0 else f"- {body}")
    return " ".join(terms) if terms else "0"
