from algobox.data_structures.trie import Trie


def test_insertion():
    trie = Trie()
    assert trie.get("") is None
    trie.insert("foo", 1)
    trie.insert("foobar", 2)
    assert trie.get("foobar") == 2

    trie = Trie()
    assert trie.get([1, 2, 3]) is None
    trie.insert([1, 2, 3], 1)
    trie.insert([3, 4, 5], 2)
    assert trie.get([3, 4, 5]) == 2


def test_get():
    trie = Trie()
    trie.insert("foo", 1)
    trie.insert("foobar", 2)
    trie.insert("bar", 3)
    trie.insert("baz", 4)
    assert trie.get("foo") == 1
    assert trie.get("food") is None

    trie = Trie()
    trie.insert([1, 2, 3, 4], 1)
    trie.insert([42], 2)
    trie.insert([42, 6, 1000], 3)
    trie.insert([1, 2, 4, 16, 32], 4)
    assert trie.get([42, 6, 1000]) == 3
    assert trie.get([43, 44, 45]) is None


def test_prefix_without_value_returns_none():
    trie = Trie()
    trie.insert("foobar", 2)
    assert trie.get("foo") is None


def test_insert_overwrites():
    trie = Trie()
    trie.insert("key", 1)
    trie.insert("key", 5)
    assert trie.get("key") == 5