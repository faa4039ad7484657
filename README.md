# sckit

Small, self-contained building blocks for Python programs. Everything uses
only the standard library.

- `sckit.crc32`: CRC-32C (Castagnoli) checksum. It can be computed piece by piece.
- `sckit.heap`: a binary min-heap keyed by integers, with an optional size limit.
- `sckit.array`: a dynamic array with ordered, unordered and last-item deletion,
  and an optional size limit.
- `sckit.ini`: an INI parser that handles sections, comments, continuation
  lines and a UTF-8 byte-order mark.
- `sckit.linkedlist`: a circular doubly linked list of caller-owned nodes.

## Installation

```
pip install sckit
```

## Examples

### CRC-32C

```python
from sckit.crc32 import crc32c

assert crc32c(b"test\0") == 2440484327

whole = crc32c(b"\0" * 100)
part = crc32c(b"\0" * 10)
assert crc32c(b"\0" * 90, part) == whole
```

`crc32c(data, crc=0)` accepts any bytes-like object. The second argument is
the checksum of the data that came before. If it is not an unsigned 32-bit
value, the function raises `ValueError`.

### Heap

```python
from sckit.heap import Heap

heap = Heap()
for priority, name in [(1, "first"), (4, "fourth"), (5, "fifth"), (3, "third"), (2, "second")]:
    heap.add(priority, name)

while len(heap):
    item = heap.pop()          # HeapItem(key=..., data=...)
    print(item.key, item.data)
```

`pop()` and `peek()` raise `IndexError` on an empty heap. If you create the
heap as `Heap(max_size=n)`, `add()` raises `OverflowError` once the heap holds
`n` items. To get max-heap behaviour, negate the keys when you add them.

### Array

```python
from sckit.array import Array

arr = Array([3, 4, 5])
arr.delete(0)            # [4, 5]
arr.add(1)               # [4, 5, 1]
arr.sort()               # [1, 4, 5]
print(list(arr), arr.last(), arr[0], len(arr))

arr = Array(["a", "b", "c", "d", "e", "f"])
arr.delete_unordered(2)  # ["a", "b", "f", "d", "e"]
```

`Array(items, max_size=n)` makes `add()` raise `OverflowError` once the array
is full. `delete_last()` and `last()` raise `IndexError` on an empty array.

### INI

```python
from sckit.ini import parse_string, IniSyntaxError

text = """
# My configuration
[Network]
hostname = example.com
port : 443
servers = alpha
          beta
"""

for item in parse_string(text):
    print(item.line, item.section, item.key, item.value)

try:
    list(parse_string("[section\n"))
except IniSyntaxError as err:
    print("bad line", err.line)
```

- Lines that start with `;` or `#` are comments. So is anything that follows a
  space and `;` or `#`.
- An indented line after an item continues that item. It is reported as
  another value under the same key.
- `parse_file(path)` reads a file the same way. It raises `OSError` if the file
  cannot be read.
- Lines longer than 1023 characters are truncated.

### Linked list

```python
from sckit.linkedlist import LinkedList, ListNode

items = LinkedList()
nodes = [ListNode(name) for name in ("first", "second", "third")]
for node in nodes:
    items.add_tail(node)

for node in items:            # removing the current node while iterating is safe
    print(node.value)

print([n.value for n in reversed(items)])
items.remove(nodes[1])
print(len(items), items.head().value, items.tail().value)
```

A node belongs to at most one list at a time. If you add a node that is
already linked, it moves instead of being linked twice. `pop_head()` and
`pop_tail()` raise `IndexError` on an empty list.

## What this package does not include

These are data-structure and parsing helpers only. The package has:

- no binary serialization buffer;
- no logging facility;
- no thread-signalling primitive;
- no command-line tools.

## Running the tests

```
pip install sckit[test]
pytest
```