"""Encoding of letters as their coordinates in a 5x5 Polybius square."""

_SQUARE_LETTERS = "ABCDEFGHIKLMNOPQRSTUVWXYZ"

_CODES = {
    letter: f"{row + 1}{column + 1}"
    for position, letter in enumerate(_SQUARE_LETTERS)
    for row, column in [divmod(position, 5)]
}
_CODES["J"] = _CODES["I"]

_ENCODE = {**_CODES, **{letter.lower(): code for letter, code in _CODES.items()}}
_DECODE = {code.encode("ascii"): letter for letter, code in _CODES.items() if letter != "J"}


def encode_ascii(string: str) -> str:
    """Encode the ASCII letters of a string as Polybius square coordinates.

    I and J share a cell. Every other character is dropped.
    """
    return "".join(_ENCODE.get(char, "") for char in string)


def decode_ascii(string: str) -> str:
    """Decode pairs of digits into upper-case letters of the Polybius square.

    Whitespace is ignored; pairs that name no cell are dropped.
    """
    data = "".join(char for char in string if not char.isspace()).encode("utf-8")
    pairs = (data[start : start + 2] for start in range(0, len(data), 2))
    return "".join(_DECODE.get(pair, "") for pair in pairs)