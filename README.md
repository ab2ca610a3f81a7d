# algobox

Classic algorithms and data structures in plain Python, with no runtime
dependencies. The code is grouped into three sub-packages: `ciphers`,
`data_structures` and `dynamic_programming`. Import from the modules
directly; the sub-package `__init__` files do not re-export anything.

## Installation

```
pip install algobox
```

## Ciphers

`algobox.ciphers` holds simple text ciphers, two encodings and a SHA-256
digest.

| Module | Functions |
| --- | --- |
| `rotation` | `caesar(cipher, shift)`, `rot13(text)`, `another_rot13(text)` |
| `vigenere` | `vigenere(plain_text, key)` |
| `xor` | `xor(text, key)` |
| `polybius` | `encode_ascii(string)`, `decode_ascii(string)` |
| `morse_code` | `encode(message)`, `decode(string)`, `InvalidMorseCodeError` |
| `sha256` | `sha256(data)` |

```python
from algobox.ciphers.rotation import caesar, rot13, another_rot13
from algobox.ciphers.vigenere import vigenere
from algobox.ciphers.xor import xor
from algobox.ciphers.polybius import encode_ascii, decode_ascii
from algobox.ciphers.morse_code import encode, decode, InvalidMorseCodeError
from algobox.ciphers.sha256 import sha256

caesar("rust", 13)                  # 'ehfg'
rot13("ABC")                        # 'NOP'
another_rot13("ABCzyx")             # 'NOPmlk'
vigenere("LoremIpsumDolorSitAmet", "base")   # 'MojinIhwvmVsmojWjtSqft'
xor(xor("test string", 32), 32)     # 'test string'

encode_ascii("This is a test")      # '4423244324431144154344'
decode_ascii("11 22 33 4")          # 'AGN'

morse = encode("Hello Morse")       # '.... . .-.. .-.. --- / -- --- .-. ... .'
decode(morse)                       # 'HELLO MORSE'

sha256(b"").hex()
# 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
```

Notes on behaviour:

- `caesar` and `vigenere` rotate ASCII letters only and keep their case;
  every other character passes through. `caesar` raises `ValueError` if
  `shift` is outside 0 to 255.
- `rot13` upper-cases its input first; `another_rot13` keeps the case.
- `vigenere` uses only the ASCII letters of the key and returns the text
  unchanged when the key has none.
- `xor` XORs the low byte of each character with `key` and raises
  `ValueError` if `key` is outside 0 to 255.
- `encode_ascii` maps I and J to the same cell and drops non-letters;
  `decode_ascii` ignores whitespace and drops digit pairs that name no cell.
- `encode` turns unsupported characters into `........`. `decode` raises
  `InvalidMorseCodeError` (a `ValueError`) when its input holds anything
  other than dots, dashes, spaces and slashes; well-formed but unknown
  sequences decode to `_`.
- `sha256` returns the 32-byte digest as `bytes`.

## Data structures

`algobox.data_structures` offers:

- `avl_tree.AVLTree`: a self-balancing ordered set with `insert`, `remove`,
  `contains` (and `in`), `len`, `is_empty`, `is_balanced` and ascending
  iteration. It can be built from an iterable.
- `binary_search_tree.BinarySearchTree`: an unbalanced tree with `insert`,
  `search`, `minimum`, `maximum`, `floor`, `ceil` and ascending iteration.
  The queries return `None` when there is no answer.
- `b_tree.BTree(branch_factor)`: a B-tree with `insert`, `search` and
  `traverse`, which prints the keys in order, nesting depth shown by braces,
  and returns the printed text.
- `graph.DirectedGraph` and `graph.UndirectedGraph`: weighted adjacency-list
  graphs with `add_node`, `add_edge((from, to, weight))`, `neighbours`,
  `contains`, `nodes` and `edges`. `neighbours` raises
  `NodeNotInGraphError` (a `KeyError`) for an unknown node.
- `heap.Heap(comparator)`, `heap.min_heap()` and `heap.max_heap()`: a binary
  heap that removes and yields its items in priority order as you iterate
  over it.
- `linked_list.LinkedList`: a doubly linked list with `add`, `get(index)`
  (returning `None` when out of range), `len`, iteration and a
  comma-separated `str`.
- `fifo_queue.Queue`: a FIFO queue with `enqueue`, `dequeue`, `peek`,
  `size`, `is_empty` and `len`; `dequeue` and `peek` raise `QueueEmptyError`
  when it is empty.
- `trie.Trie`: a prefix tree keyed by any iterable of hashable parts, with
  `insert(key, value)` and `get(key)` (returning `None` when absent).

```python
from algobox.data_structures.avl_tree import AVLTree
from algobox.data_structures.heap import min_heap
from algobox.data_structures.trie import Trie

tree = AVLTree(range(7, 0, -1))
list(tree)                          # [1, 2, 3, 4, 5, 6, 7]
tree.remove(4)                      # True
tree.remove(4)                      # False

heap = min_heap()
for value in (4, 2, 9, 11):
    heap.add(value)
next(heap)                          # 2
list(heap)                          # [4, 9, 11]

trie = Trie()
trie.insert("foo", 1)
trie.insert([1, 2, 3], "numbers")
trie.get("foo")                     # 1
trie.get("food")                    # None
```

## Dynamic programming

`algobox.dynamic_programming` offers:

- `coin_change.coin_change(coins, amount)`: fewest coins summing to the
  amount, or `None` if impossible.
- `edit_distance.edit_distance(a, b)` and `edit_distance.edit_distance_se(a, b)`:
  Levenshtein distance over the UTF-8 bytes of the strings, the second using
  a single table row.
- `egg_dropping.egg_drop(eggs, floors)`: fewest drops that find the highest
  safe floor.
- `fibonacci.fibonacci(n)` and `fibonacci.recursive_fibonacci(n)`: Fibonacci
  numbers counting F(0) = F(1) = 1; they raise `OverflowError` once the
  value no longer fits in 128 bits (from n = 186).
- `knapsack.knapsack(w, weights, values)`: the 0/1 knapsack, returning the
  optimal value, the total weight taken and the 1-based indices chosen.
- `subsequences.longest_common_subsequence(a, b)` and
  `subsequences.longest_continuous_increasing_subsequence(items)`.
- `maximum_subarray.maximum_subarray(array)`: largest sum of a non-empty
  contiguous part; raises `ValueError` for an empty array.

```python
from algobox.dynamic_programming.coin_change import coin_change
from algobox.dynamic_programming.egg_dropping import egg_drop
from algobox.dynamic_programming.knapsack import knapsack
from algobox.dynamic_programming.subsequences import (
    longest_common_subsequence,
    longest_continuous_increasing_subsequence,
)

coin_change([1, 2, 5], 11)          # 3
egg_drop(2, 100)                    # 14
knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16])
# (51, 26, [2, 3, 4])
longest_common_subsequence("aggtab", "gxtxayb")           # 'gtab'
longest_continuous_increasing_subsequence([1, 2, 2, 3, 4, 2])   # [2, 3, 4]
```

## Running the tests

```
pip install -e ".[test]"
pytest
```