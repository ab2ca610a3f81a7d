"""The Vigenère cipher over ASCII letters."""

import string


def vigenere(plain_text: str, key: str) -> str:
    """Rotate each ASCII letter of ``plain_text`` by the matching key letter.

    Only ASCII letters of ``key`` are used; the key advances only on letters
    of the text. With an empty key the text is returned unchanged.
    """
    shifts = [ord(char.lower()) - ord("a") for char in key if char in string.ascii_letters]
    if not shifts:
        return plain_text

    result = []
    index = 0
    for char in plain_text:
        if char in string.ascii_letters:
            first = ord("a") if char.islower() else ord("A")
            shift = shifts[index % len(shifts)]
            index += 1
            result.append(chr(first + (ord(char) - first + shift) % 26))
        else:
            result.append(char)
    return "".join(result)