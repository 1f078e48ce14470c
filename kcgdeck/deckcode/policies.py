"""Trim policies for the two places where known decoder revisions disagree.

Padding policies map the 1-based alphabet position of the padding
descriptor to the number of trailing bits to discard. Digit-trim policies
shorten the intermediate digit string to a multiple of five.

Both are looked up by name so a caller (or the config file) can pin one
explicitly.
"""

PLACEHOLDER = "X"

DEFAULT_PADDING_POLICY = "modular"
DEFAULT_DIGIT_TRIM_POLICY = "truncate"


def padding_octet_floor(position: int) -> int:
    """Trim count used by early revisions: 8 - (position // 8 + 1)."""
    if position % 8 == 0:
        return 0
    return 8 - (position // 8 + 1)


def padding_modular(position: int) -> int:
    """Trim count used by the current revision: (8 - position % 8) % 8."""
    return (8 - position % 8) % 8


def trim_truncate(digits: str, count: int) -> str:
    """Drop the last `count` characters."""
    if count <= 0:
        return digits
    return digits[:-count]


def trim_placeholder_first(digits: str, count: int) -> str:
    """Drop placeholders scanning from the end, then real characters.

    Placeholders anywhere in the string are removed first (last one
    first). If fewer than `count` exist, the rest is cut from the end.
    """
    if count <= 0:
        return digits

    chars = list(digits)
    removed = 0
    i = len(chars) - 1
    while i >= 0 and removed < count:
        if chars[i] == PLACEHOLDER:
            del chars[i]
            removed += 1
        i -= 1

    remaining = count - removed
    if remaining:
        chars = chars[:-remaining] if remaining < len(chars) else []
    return "".join(chars)


PADDING_POLICIES = {
    "octet-floor": padding_octet_floor,
    "modular": padding_modular,
}

DIGIT_TRIM_POLICIES = {
    "truncate": trim_truncate,
    "placeholder-first": trim_placeholder_first,
}


def get_padding_policy(name: str):
    try:
        return PADDING_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown padding policy: {name!r} (choose from {', '.join(PADDING_POLICIES)})"
        ) from None


def get_digit_trim_policy(name: str):
    try:
        return DIGIT_TRIM_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown digit trim policy: {name!r} (choose from {', '.join(DIGIT_TRIM_POLICIES)})"
        ) from None
