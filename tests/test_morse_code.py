import pytest

from algobox.ciphers.morse_code import InvalidMorseCodeError, decode, encode


def test_encrypt_only_letters():
    assert encode("Hello Morse") == ".... . .-.. .-.. --- / -- --- .-. ... ."


def test_encrypt_letters_and_special_characters():
    assert (
        encode("What's a great day!")
        == ".-- .... .- - .----. ... / .- / --. .-. . .- - / -.. .- -.-- -.-.--"
    )


def test_encrypt_message_with_unsupported_character():
    assert encode("Error?? {}") == ". .-. .-. --- .-. ..--.. ..--.. / ........ ........"


def test_encode_empty():
    assert encode("") == ""


def test_decrypt_valid_morsecode_with_spaces():
    expected = "Hello Morse! How's it goin, \"eh\"?".upper()
    assert decode(encode(expected)) == expected


def test_decrypt_valid_character_set_invalid_morsecode():
    encrypted = ".-.-.--.-.-. --------. ..---.-.-. .-.-.--.-.-. / .-.-.--.-.-."
    assert decode(encrypted) == "____ _"


def test_decrypt_invalid_morsecode_with_spaces():
    with pytest.raises(InvalidMorseCodeError):
        decode("1... . .-.. .-.. --- / -- --- .-. ... .")


def test_invalid_morse_error_is_value_error():
    with pytest.raises(ValueError):
        decode("abc")


def test_decode_simple_word():
    assert decode("... --- ...") == "SOS"


def test_decode_empty():
    assert decode("") == ""