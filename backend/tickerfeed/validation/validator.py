from __future__ import annotations

from tickerfeed.errors import ValidationError

SYMBOLS_REQUIRED = "Symbols array is required"


def require_symbols(symbols: list[str] | None) -> list[str]:
    if not symbols:
        raise ValidationError(SYMBOLS_REQUIRED)
    return list(symbols)
