from array import array

import pytest

from refresher.arrays import (
    array_copy,
    array_deserialize,
    array_is_equal,
    array_locate,
    array_serialize,
)

INT = array("i").itemsize


def ints(*values):
    return array("i", values)


# array_copy

def test_copy_null_src():
    with pytest.raises(ValueError):
        array_copy(None, ints(0, 0, 0, 0, 0), INT, 5)


def test_copy_null_dst():
    with pytest.raises(ValueError):
        array_copy(ints(0, 0, 0, 0, 0), None, INT, 5)


def test_copy_zero_size():
    dst = ints(1, 2, 3, 4, 5)
    with pytest.raises(ValueError):
        array_copy(ints(0, 0, 0, 0, 0), dst, 0, 5)
    assert list(dst) == [1, 2, 3, 4, 5]


def test_copy_zero_count():
    dst = ints(1, 2, 3, 4, 5)
    with pytest.raises(ValueError):
        array_copy(ints(0, 0, 0, 0, 0), dst, INT, 0)
    assert list(dst) == [1, 2, 3, 4, 5]


def test_copy_good():
    dst = ints(0, 0, 0, 0, 0)
    array_copy(ints(1, 2, 3, 4, 5), dst, INT, 5)
    assert list(dst) == [1, 2, 3, 4, 5]


def test_copy_bytearray_partial():
    dst = bytearray(b"xxxxxx")
    array_copy(b"abcdef", dst, 2, 2)
    assert dst == bytearray(b"abcdxx")


def test_copy_too_large():
    with pytest.raises(ValueError):
        array_copy(b"ab", bytearray(2), 1, 5)


# array_is_equal

def test_equal_null_src():
    with pytest.raises(ValueError):
        array_is_equal(None, ints(0, 0, 0, 0, 0), INT, 5)


def test_equal_null_dst():
    with pytest.raises(ValueError):
        array_is_equal(ints(0, 0, 0, 0, 0), None, INT, 5)


def test_equal_zero_size():
    with pytest.raises(ValueError):
        array_is_equal(ints(0, 0, 0, 0, 0), ints(1, 2, 3, 4, 5), 0, 5)


def test_equal_zero_count():
    with pytest.raises(ValueError):
        array_is_equal(ints(0, 0, 0, 0, 0), ints(1, 2, 3, 4, 5), INT, 0)


def test_equal_same_front_different_rest():
    assert array_is_equal(ints(1, 4, 5, 6, 7), ints(1, 2, 3, 4, 5), INT, 5) is False


def test_equal_same_array():
    assert array_is_equal(ints(1, 2, 3, 4, 5), ints(1, 2, 3, 4, 5), INT, 5) is True


# array_locate

def test_locate_null_src():
    with pytest.raises(ValueError):
        array_locate(None, ints(0), INT, 5)


def test_locate_null_target():
    with pytest.raises(ValueError):
        array_locate(ints(0, 0, 0, 0, 0), None, INT, 5)


def test_locate_zero_size():
    with pytest.raises(ValueError):
        array_locate(ints(0, 0, 0, 0, 0), ints(0), 0, 5)


def test_locate_zero_count():
    assert array_locate(ints(0, 0, 0, 0, 0), ints(0), INT, 0) == -1


def test_locate_not_found():
    assert array_locate(ints(1, 2, 4, 5, 6), ints(3), INT, 5) == -1


def test_locate_found():
    assert array_locate(ints(1, 2, 4, 5, 6), ints(4), INT, 5) == 2


def test_locate_first_of_duplicates():
    assert array_locate(b"abab", b"b", 1, 4) == 1


# array_serialize

def test_serialize_null_data(tmp_path):
    with pytest.raises(ValueError):
        array_serialize(None, tmp_path / "testing_file.dat", INT, 5)


def test_serialize_null_filename():
    with pytest.raises(ValueError):
        array_serialize(ints(0, 0, 0, 0, 0), None, INT, 5)


def test_serialize_zero_elem_size(tmp_path):
    with pytest.raises(ValueError):
        array_serialize(ints(0, 0, 0, 0, 0), tmp_path / "testing_file.dat", 0, 5)


def test_serialize_zero_count(tmp_path):
    with pytest.raises(ValueError):
        array_serialize(ints(0, 0, 0, 0, 0), tmp_path / "testing_file.dat", INT, 0)


def test_serialize_empty_filename():
    with pytest.raises(OSError):
        array_serialize(ints(0, 0, 0, 0, 0), "", INT, 5)


def test_serialize_newline_filename():
    with pytest.raises(ValueError):
        array_serialize(ints(0, 0, 0, 0, 0), "\n", INT, 5)


def test_serialize_good_file(tmp_path):
    path = tmp_path / "actual_file.txt"
    data = ints(1, 2, 3, 4, 5)
    array_serialize(data, path, INT, 5)
    assert path.read_bytes() == data.tobytes()


# array_deserialize

def test_deserialize_null_filename():
    with pytest.raises(ValueError):
        array_deserialize(None, INT, 5)


def test_deserialize_zero_elem_size(tmp_path):
    with pytest.raises(ValueError):
        array_deserialize(tmp_path / "testing_file.dat", 0, 5)


def test_deserialize_zero_count(tmp_path):
    with pytest.raises(ValueError):
        array_deserialize(tmp_path / "testing_file.dat", INT, 0)


def test_deserialize_empty_filename():
    with pytest.raises(OSError):
        array_deserialize("", INT, 5)


def test_deserialize_newline_filename():
    with pytest.raises(ValueError):
        array_deserialize("\n", INT, 5)


def test_deserialize_good_file(tmp_path):
    path = tmp_path / "actual_file.txt"
    array_serialize(ints(1, 2, 3, 4, 5), path, INT, 5)
    raw = array_deserialize(path, INT, 5)
    assert list(array("i", raw)) == [1, 2, 3, 4, 5]


def test_deserialize_short_file(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"abc")
    assert array_deserialize(path, 1, 10) == b"abc"