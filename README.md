# simpledb

Building blocks for a small relational database engine. It is written in plain
Python and has no third-party dependencies.

## What it contains

- `simpledb.clock`: `SystemClock` has `now()`, `sleep(seconds)` and
  `since(start)`, all in seconds on the monotonic timer.
- `simpledb.lock_state`: lock states stored as integers. `X_LOCKED` is -1,
  `UNLOCKED` is 0, and a positive value counts the shared locks. The module
  has `is_unlocked`, `is_x_locked`, `is_s_locked`, `is_multiple_s_locked`,
  `next_state` and `prev_state`. The last two raise `LockStateError` when a
  state has no successor or no predecessor.
- `simpledb.lock`: `LockTable` gives shared (`s_lock`) and exclusive
  (`x_lock`) locks on any hashable block key, and releases them with
  `unlock`. Its constructor takes `max_wait_time` (default 10 seconds) and an
  optional clock. A request that cannot be granted within the wait limit
  raises `LockAbortError`.
- `simpledb.concurrency`: `ConcurrencyManager` holds the locks of one
  transaction. `s_lock` takes a shared lock once per block. `x_lock` takes a
  shared lock and then upgrades it to an exclusive one. `release` drops every
  lock. The `locks` property is a read-only mapping from each block to its
  `LockType` (`S` or `X`).
- `simpledb.txnum`: `TxNumberGenerator.next()` is thread-safe and hands out
  1, 2, 3, and so on. `default_generator()` returns one shared instance for
  the whole process.
- `simpledb.buffer_list`: `BufferList` wraps any buffer manager that has
  `pin(block)` and `unpin(buffer)`. It remembers which buffer holds each
  pinned block and how many times that block is pinned (`pin_count`).
  `unpin_all` releases every pin.
- `simpledb.schema`: `Schema` is an ordered set of fields, each with a
  `FieldType` (`INTEGER` or `VARCHAR`) and a length. Asking for a missing
  field raises `FieldNotFoundError`.
- `simpledb.rid`: `RID(block_number, slot)` identifies a record. It prints as
  `[block, slot]`.
- `simpledb.layout`: `Layout.from_schema` places each field after a 4-byte
  slot flag. An integer field takes 4 bytes. A string of length n takes
  `max_length(n)`, which is 4 + 4n bytes.
- `simpledb.expressions`: `ConstantExpression` and `FieldExpression`.
- `simpledb.predicate`: `Term` is an equality between two expressions, and
  `Predicate` is a conjunction of terms. A predicate can be tested against a
  scan and can estimate its reduction factor. It can be split into the terms
  that apply to one schema (`select_sub_pred`) or to a join of two schemas
  (`join_sub_pred`). Either split raises `EmptySubPredicateError` when no term
  applies. A predicate can also find `field=constant` and `field=field`
  equivalences.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Computing a layout:

```python
from simpledb.schema import Schema
from simpledb.layout import Layout

schema = Schema()
schema.add_int_field("id")
schema.add_string_field("name", 20)

layout = Layout.from_schema(schema)
layout.offset("id")    # 4
layout.offset("name")  # 8
layout.slot_size       # 92
```

Building a predicate:

```python
from simpledb.expressions import ConstantExpression, FieldExpression
from simpledb.predicate import Predicate, Term

pred = Predicate(Term(FieldExpression("A"), ConstantExpression(100)))
str(pred)                            # "A=100"
pred.find_constant_equivalence("A")  # 100
```

Locking blocks for a transaction:

```python
from simpledb.concurrency import ConcurrencyManager
from simpledb.lock import LockTable

table = LockTable(max_wait_time=1.0)
tx_locks = ConcurrencyManager(table)
tx_locks.x_lock(("data.tbl", 0))
tx_locks.has_x_lock(("data.tbl", 0))  # True
tx_locks.release()
```

## What it does not do

This package has no storage. It does not read or write files, and it has no
buffer manager, log manager, write-ahead log records or recovery. It has no
record pages or table scans, and it has no select, project or product scans.
`BufferList` and `Predicate.is_satisfied` work with objects that you supply:
a buffer manager with `pin` and `unpin`, and a scan with `get_val`. There is
no SQL parser, no query planner and no command-line program.