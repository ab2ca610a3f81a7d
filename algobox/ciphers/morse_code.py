"""Conversion between text and International Morse code."""

UNKNOWN_CHARACTER = "........"
UNKNOWN_MORSE_CHARACTER = "_"

_MORSE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "1": ".----", "2": "..---", "3": "...--", "4": "....-", "5": ".....",
    "6": "-....", "7": "--...", "8": "---..", "9": "----.", "0": "-----",
    "&": ".-...", "@": ".--.-.", ":": "---...", ",": "--..--", ".": ".-.-.-",
    "'": ".----.", '"': ".-..-.", "?": "..--..", "/": "-..-.", "=": "-...-",
    "+": ".-.-.", "-": "-....-", "(": "-.--.", ")": "-.--.-", " ": "/",
    "!": "-.-.--",
}

_TEXT = {code: char for char, code in _MORSE.items()}
_TEXT[" "] = " "
_TEXT[""] = ""

_VALID_SYMBOLS = frozenset(".- /")


class InvalidMorseCodeError(ValueError):
    """Raised when a Morse string holds characters other than '.', '-', ' ' and '/'."""


def encode(message: str) -> str:
    """Encode ``message`` as Morse code, one space between symbols.

    Words are separated by '/'; unsupported characters become '........'.
    """
    return " ".join(_MORSE.get(char.upper(), UNKNOWN_CHARACTER) for char in message)


def decode(string: str) -> str:
    """Decode Morse code into upper-case text.

    Undecipherable symbols become '_'. Raises InvalidMorseCodeError if the
    code holds any character other than '.', '-', ' ' and '/'.
    """
    if not set(string) <= _VALID_SYMBOLS:
        raise InvalidMorseCodeError("Invalid morse code")
    return " ".join(
        "".join(_TEXT.get(token, UNKNOWN_MORSE_CHARACTER) for token in part.split(" "))
        for part in string.split("/")
    )