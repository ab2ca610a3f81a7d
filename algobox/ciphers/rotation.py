"""Letter-rotation ciphers: Caesar shifts and ROT13."""

import string

_ROT13_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    "NOPQRSTUVWXYZABCDEFGHIJKLM" + "nopqrstuvwxyzabcdefghijklm",
)


def another_rot13(text: str) -> str:
    """Apply ROT13 to ASCII letters, keeping their case; other characters pass through."""
    return text.translate(_ROT13_TABLE)


def caesar(cipher: str, shift: int) -> str:
    """Rotate every ASCII letter of ``cipher`` forward by ``shift`` places.

    ``shift`` must fit in an unsigned byte (0 to 255). Non-ASCII characters
    are left untouched.
    """
    if not 0 <= shift <= 0xFF:
        raise ValueError(f"shift must be between 0 and 255, got {shift}")

    def rotate(char: str) -> str:
        if char not in string.ascii_letters:
            return char
        first = ord("a") if char.islower() else ord("A")
        return chr(first + (ord(char) - first + shift) % 26)

    return "".join(rotate(char) for char in cipher)


def rot13(text: str) -> str:
    """Upper-case ``text`` and apply ROT13 to the letters A to Z."""

    def rotate(char: str) -> str:
        if "A" <= char <= "M":
            return chr(ord(char) + 13)
        if "N" <= char <= "Z":
            return chr(ord(char) - 13)
        return char

    return "".join(rotate(char) for char in text.upper())