# skyhash

Building blocks for a key/value database server whose clients speak the
Skyhash protocol. The package needs nothing outside the standard library.

## What is included

- `skyhash.kvengine`: `KVEngine`, a thread-safe in-memory table of binary
  keys and values. UTF-8 can be enforced for keys (`encoded_k`), for values
  (`encoded_v`), or for both; data that fails the check raises
  `EncodingError`. `alter_table_key` and `alter_table_value` change the
  switches and raise `TableNotEmptyError` if the table holds records.
  `get_encoder`, `get_key_encoder` and `get_value_encoder` return validators
  that follow the current switches.
- `skyhash.encoding`: `is_utf8` checks whether bytes (or a `str`) are
  well-formed UTF-8 using a finite state machine.
- `skyhash.entity`: `get_query_entity` splits `keyspace` or
  `keyspace:table` into a `(keyspace, table)` tuple, and
  `is_valid_container_name` checks a single identifier. Bad names raise
  `QueryError`, whose `response` attribute holds the response element to send
  back.
- `skyhash.tableargs`: `parse_table_args` reads a table name and a model
  declaration such as `keymap(str, binstr)` and returns the entity and the
  model code (`0` binstr/binstr, `1` binstr/str, `2` str/str, `3` str/binstr).
  Errors raise `QueryError`.
- `skyhash.responses`: ready-made response elements (such as `OKAY`,
  `BAD_EXPRESSION`, `UNKNOWN_MODEL`) and complete responses prefixed with
  `R_` (such as `R_OKAY`, `R_HEYA`), as bytes.
- `skyhash.registry`: process-wide health state (`state_okay`, `poison`,
  `unpoison`), the global flush lock (`lock_flush_state`, which returns a
  guard usable as a context manager) and the `Trip` switch returned by
  `get_preload_tripswitch`.
- `skyhash.flock`: `FileLock.lock` opens a file and takes an exclusive,
  non-blocking lock on it, raising `OSError` if another holder has it.
  `write` replaces the file's content, `fsync` flushes it, `try_clone`
  returns a second handle, and `unlock`/`close` release it. Used as a context
  manager, the lock is released and the file closed on exit.

## Installation

```
pip install .
```

## Examples

Use the key/value engine with UTF-8 keys enforced:

```python
from skyhash.kvengine import EncodingError, KVEngine

table = KVEngine(encoded_k=True, encoded_v=False)
table.set(b"user", b"\x00\x01")        # True
table.get(b"user")                     # b"\x00\x01"
try:
    table.set(b"\xf0\x90\x80", b"x")
except EncodingError:
    pass
```

Parse entity names and table declarations:

```python
from skyhash.entity import QueryError, get_query_entity
from skyhash.tableargs import parse_table_args
from skyhash import responses

get_query_entity(b"ks:tbl")                       # (b"ks", b"tbl")
parse_table_args("mytbl", "keymap(str, binstr)")  # ((b"mytbl", None), 3)
try:
    parse_table_args("mytbl", "keymap(str, str, str)")
except QueryError as exc:
    assert exc.response == responses.TOO_MANY_ARGUMENTS
```

Take a lock on a pid file:

```python
from skyhash.flock import FileLock

with FileLock.lock(".sky_pid") as lock:
    lock.write(b"1234")
```

## What this package does not do

There is no decoder for incoming query packets and no encoder that turns
Python values into response bytes; only the fixed response constants in
`skyhash.responses` are provided. There is no network server, no command to
start one, and no on-disk storage of tables: `KVEngine` lives in memory only.

## Running the tests

```
pip install .[test]
pytest
```