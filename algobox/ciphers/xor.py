"""Single-byte XOR cipher."""


def xor(text: str, key: int) -> str:
    """XOR the low byte of every character of ``text`` with ``key``.

    Each result byte is returned as the character with that code point.
    ``key`` must fit in an unsigned byte (0 to 255).
    """
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must be between 0 and 255, got {key}")
    return "".join(chr((ord(char) & 0xFF) ^ key) for char in text)