# sortedblocks

Sorted containers ordered by a three-way comparison function, and a
command that times them.

## Modules

`sortedblocks.bsearch`

- `binary_search(items, target, cmp)` searches a sorted sequence.
  `cmp(item, target)` returns a negative number, zero or a positive number.
  The result is the index of a match. When nothing matches, the result is
  `-(pos + 1)`, where `pos` is the index at which `target` would be
  inserted.
- `cmp_int`, `cmp_int64` compare the first field of two tuple-like items.
  `cmp_2int`, `cmp_2int64` compare the first two fields, and `cmp_3int`
  compares the first three, in lexicographic order.
- `SortedArray(limit, cmp)` is a sorted array of at most `limit` items.
  `limit=None` means no limit. Items that compare equal are stored once.
  - `put(item)` replaces the equal item or inserts in order. It returns
    the position.
  - `put_at(pos, item)` inserts at a given position without searching.
  - `get(key)` returns the stored item or `None`.
  - `get_pos(key)` returns the position, or `-(insertion_point + 1)`.
  - `remove(key)` returns the position the item had. It raises `KeyError`
    if the key is absent.
  - `remove_at(pos)` returns the removed item. It raises `IndexError` if
    `pos` is out of range.
  - Indexing, iteration and `len()` work as on a list.
  - An insert beyond the limit raises `CapacityError`.

`sortedblocks.blocklist`

- `BlockList(block_element_limit, cmp)` keeps items in sorted blocks. The
  limit must be an even number of at least 2. A block that reaches the
  limit is split in half. After a removal, a block is merged with a
  neighbour when the two together hold fewer than half the limit. Items
  that compare equal are stored once.
  - `put(item)` inserts the item or replaces the equal one.
  - `get(key)` returns the stored item or `None`.
  - `get_pos(key)` returns the position across all blocks, or
    `-(insertion_point + 1)`.
  - `remove(key)` returns the removed item. It raises `KeyError` if the
    key is absent.
  - `block_sizes()` lists how many items each block holds.
  - `len()` and iteration in sorted order are supported.

`sortedblocks.bench` holds the timing functions used by the command:

- `Lcg`, a linear congruential generator modulo 2**31.
- `Element`, a `(uid, source)` record.
- `make_elements`.
- `benchmark_sorted_array`, `benchmark_block_list` and `benchmark_map`
  (the last uses `sortedcontainers.SortedDict`).

## Install

```
pip install .
```

## Usage

```python
from sortedblocks.bsearch import SortedArray, cmp_2int64
from sortedblocks.blocklist import BlockList

arr = SortedArray(limit=1000, cmp=cmp_2int64)
arr.put((5, 1))
arr.put((3, 9))
arr.get_pos((5, 1))   # 1
arr.get_pos((4, 0))   # -2: it would be inserted at position 1
list(arr)             # [(3, 9), (5, 1)]

blocks = BlockList(block_element_limit=8, cmp=cmp_2int64)
for i in range(20):
    blocks.put((i, i))
blocks.get_pos((7, 7))  # 7
blocks.remove((7, 7))
len(blocks)             # 19
blocks.block_sizes()    # items held in each block
```

## Timing command

```
sortedblocks-bench [COUNT] [RESERVED] [ARRAY_TEST] [--seed N] [--map]
```

You can also run it as `python -m sortedblocks.bench`.

By default the command does the following:

- It draws `COUNT` pseudo-random elements. `COUNT` defaults to 100000.
- It times puts and lookups on a `SortedArray` limited to 5,002,400 items.
  The `SortedArray` run is skipped when `ARRAY_TEST` is anything other
  than `1`.
- It times puts, lookups and removals on a `BlockList` with a block limit
  of 8000.
- It prints costs in milliseconds and microseconds, the error counts and
  the positions of ten probe elements.

`RESERVED` is accepted and ignored. `--seed` fixes the generator seed. By
default the seed is the current time.

With `--map`, the command instead times a sorted mapping. `COUNT` then
defaults to 1000000. The command reports the put costs and the position
of one extra element.

The command only reports timings. It does not save results or compare
runs.

## Tests

```
pip install .[test]
pytest
```