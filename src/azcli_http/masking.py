from __future__ import annotations

MASK_PLACEHOLDER = "***token too short to mask safely***"
_MIN_MASKABLE_LENGTH = 20


def mask_token(token: str) -> str:
    """Return ``token`` reduced to its first 10 and last 5 characters.

    Tokens of 20 characters or fewer are replaced entirely by
    :data:`MASK_PLACEHOLDER`.
    """

    if len(token) > _MIN_MASKABLE_LENGTH:
        return f"{token[:10]}...{token[-5:]}"
    return MASK_PLACEHOLDER


__all__ = ["MASK_PLACEHOLDER", "mask_token"]
