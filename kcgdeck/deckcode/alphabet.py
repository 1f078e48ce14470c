"""Wire constants and the 6-bit symbol codec for KCG deck codes."""

MARKER = "KCG-"

# Position in this string is the symbol's 6-bit value
ALPHABET = "AIQYgow5BJRZhpx6CKSaiqy7DLTbjrz8EMUcks19FNVdlt2!GOWemu3?HPXfnv4/"

# Expansion tables, selected by the last digit of a chunk
TABLE_A = "eABCDEFGHI"
TABLE_B = "pJKLMNOPQR"

# Table symbols that stand for multi-letter set codes
SET_CODES = {
    "e": "ex",
    "p": "prm",
}

SYMBOL_BITS = 6

_POSITIONS = {symbol: i for i, symbol in enumerate(ALPHABET)}


def symbol_value(symbol: str) -> int:
    """Return the 0-based alphabet position of a symbol, or -1 if unknown."""
    return _POSITIONS.get(symbol, -1)


def is_symbol(symbol: str) -> bool:
    return symbol in _POSITIONS


def symbols_to_bits(symbols: str) -> str:
    """Concatenate the 6-bit binary form of each symbol, in order."""
    return "".join(format(_POSITIONS[s], f"0{SYMBOL_BITS}b") for s in symbols)


def set_code(symbol: str) -> str:
    return SET_CODES.get(symbol, symbol)
