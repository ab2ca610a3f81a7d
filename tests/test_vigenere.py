from algobox.ciphers.vigenere import vigenere


def test_empty():
    assert vigenere("", "test") == ""


def test_vigenere_base():
    assert vigenere("LoremIpsumDolorSitAmet", "base") == "MojinIhwvmVsmojWjtSqft"


def test_vigenere_with_spaces():
    assert (
        vigenere("Lorem ipsum dolor sit amet, consectetur adipiscing elit.", "spaces")
        == "Ddrgq ahhuo hgddr uml sbev, ggfheexwljr chahxsemfy tlkx."
    )


def test_vigenere_unicode_and_numbers():
    assert (
        vigenere("1 Lorem ⏳ ipsum dolor sit amet Ѡ", "unicode")
        == "1 Fbzga ⏳ ltmhu fcosl fqv opin Ѡ"
    )


def test_vigenere_unicode_key():
    assert vigenere("Lorem ipsum dolor sit amet", "😉 key!") == "Vspoq gzwsw hmvsp cmr kqcd"


def test_vigenere_empty_key():
    assert vigenere("Lorem ipsum", "") == "Lorem ipsum"


def test_vigenere_key_without_letters_leaves_text():
    assert vigenere("Lorem ipsum", "123 !") == "Lorem ipsum"


def test_vigenere_key_a_is_identity():
    assert vigenere("Hello World", "a") == "Hello World"