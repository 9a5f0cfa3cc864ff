# refresher

Small utility modules for byte buffers, bitmaps, fixed-size binary
records, NUL-terminated strings and low-level file I/O.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `refresher.allocation`

- `allocate_array(member_size, nmember, clear)` returns a zero-filled
  `bytearray` of `member_size * nmember` bytes.
- `reallocate_array(buffer, size)` resizes a `bytearray` in place, padding
  with zero bytes when it grows; a size of `0` empties it and returns `None`.
- `deallocate_array(buffer)` empties a buffer (accepts `None`) and returns
  `None`.
- `read_line_to_buffer(filename)` returns the first line of a text file,
  at most 1095 characters.

### `refresher.arrays`

Work on any buffer object (bytes, bytearray, `array.array`, ...) as
`elem_count` elements of `elem_size` bytes:

- `array_copy(src, dst, elem_size, elem_count)` copies into a writable `dst`.
- `array_is_equal(array_a, array_b, elem_size, elem_count)` compares byte
  for byte.
- `array_locate(data, target, elem_size, elem_count)` returns the index of
  the first matching element, or `-1`.
- `array_serialize(src_data, dst_file, elem_size, elem_count)` writes the raw
  bytes to a file; `array_deserialize(src_file, elem_size, elem_count)` reads
  them back as `bytes`. File names containing a newline are rejected.

### `refresher.bitmap`

`Bitmap(n_bits)` is a zero-initialised bitmap stored least significant bit
first in `data` (a `bytearray` of `byte_count` bytes). It has `set`,
`reset` and `test`, which raise `IndexError` for bits outside the map, and
`ffs()` / `ffz()`, which return the first set / first clear bit or `None`.

### `refresher.debug`

`terrible_sort(values)` sorts a mutable sequence of unsigned 16-bit values
in place and returns it.

### `refresher.records`

`Record(age, name)` is a dataclass whose binary form (`Record.to_bytes()`,
`parse_record(data)`) is a little-endian 32-bit age followed by a 28-byte,
NUL-padded name field. `create_blank_records(num_records)` returns zeroed
records, `read_records(input_filename, num_records)` reads them from a file,
and `create_record(name, age)` validates a name shorter than 50 bytes and an
age from 1 to 200, storing at most 27 bytes of the name.

### `refresher.sstring`

`string_valid`, `string_duplicate`, `string_equal` and `string_length` work
on byte strings; a `str` argument is encoded as UTF-8 with a terminating
NUL. `string_tokenize(text, delims, max_token_length, requested_tokens)`
splits on any delimiter character, dropping empty tokens.
`string_to_int(text)` parses a leading decimal integer that must fit in a
32-bit signed int.

### `refresher.sysprog`

- `bulk_read(input_filename, offset, size)` reads up to `size` bytes at an
  offset.
- `bulk_write(data, output_filename, offset)` writes into an existing file at
  an offset, without creating or truncating it, and returns the byte count.
- `file_stat(query_filename)` returns `os.stat_result`.
- `endianess_converter(values)` returns each unsigned 32-bit value with its
  byte order reversed.

### `refresher.structures`

`FruitType`, `Sample`, `Fruit`, `Orange` and `Apple` dataclasses, with
`compare_structs(a, b)`, `sort_fruit(fruits)` (returns an
`(apples, oranges)` count), `initialize_array(apples, oranges)`,
`initialize_orange()`, `initialize_apple()`, and `alignments()` /
`print_alignments()` reporting native C type alignments.

## Example

```python
from refresher.bitmap import Bitmap
from refresher.sysprog import endianess_converter

bits = Bitmap(58)
bits.set(0)
bits.set(57)
assert bits.ffs() == 0
assert bits.ffz() == 1

assert endianess_converter([1]) == [0x01000000]
```

## Errors

Invalid arguments raise `ValueError`; out-of-range bits raise `IndexError`;
a negative record count raises `MemoryError`; reading past the end of a
file raises `EOFError`; failed file operations raise `OSError`.

## Scope

This is a library only: it provides no command-line tool.