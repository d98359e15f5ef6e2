import numpy as np
import pytest
import io
import sfs
from sfs.array import Array, Shape


def test_shape():
    shape = Shape([6, 3, 7])
    assert shape.elements() == 126
    assert shape.dimensions == 3
    assert shape.strides() == (21, 7, 1)
    assert str(shape) == "6/3/7"
    assert shape.remove_axis(1) == (6, 7)
    assert Shape(5) == (5,)

    with pytest.raises(sfs.ShapeError):
        Shape([3, 0])


def test_index_from_flat():
    shape = Shape([3, 3, 4])
    assert shape.index_from_flat(0) == (0, 0, 0)
    assert shape.index_from_flat(1) == (0, 0, 1)
    assert shape.index_from_flat(4) == (0, 1, 0)
    assert shape.index_from_flat(12) == (1, 0, 0)
    assert shape.index_from_flat(35) == (2, 2, 3)
    assert shape.index_sum_from_flat(35) == 7

    # round trip of all flat offsets
    for s in [Shape([3, 3, 4]), Shape([1, 5]), Shape([7])]:
        for flat in range(s.elements()):
            assert s.flat_index(s.index_from_flat(flat)) == flat


def test_flat_index_out_of_bounds():
    shape = Shape([2, 3])
    assert shape.flat_index([1, 2]) == 5
    assert shape.flat_index([2, 0]) is None
    assert shape.flat_index([0]) is None
    assert shape.flat_index([0, 0, 0]) is None


def test_array_new():
    array = Array(np.arange(6), [2, 3])
    assert array.dimensions == 2
    assert array.elements == 6
    assert list(array) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    with pytest.raises(sfs.ShapeError):
        Array([1.0, 2.0, 3.0], [2, 2])

    assert Array.from_zeros([2, 2]) == Array([0.0] * 4, [2, 2])
    assert Array.from_element(1.5, 3) == Array([1.5] * 3, 3)
    assert Array.from_iter(range(4), [2, 2]) == Array([0, 1, 2, 3], [2, 2])


def test_array_owns_data():
    data = np.zeros(4)
    array = Array(data, [2, 2])
    data[0] = 1.0
    assert array[0, 0] == 0.0


def test_array_get_set():
    array = Array(np.arange(6), [2, 3])
    assert array.get([1, 2]) == 5.0
    assert array.get([2, 0]) is None
    assert array.get([0]) is None

    assert array.set([0, 1], 10.0)
    assert array[0, 1] == 10.0
    assert not array.set([0, 3], 1.0)

    with pytest.raises(IndexError):
        array[2, 0]
    with pytest.raises(IndexError):
        array[0, 3] = 1.0


def test_get_axis():
    array = Array(np.arange(6), [2, 3])

    assert list(array.get_axis(0, 0)) == [0.0, 1.0, 2.0]
    assert list(array.get_axis(0, 1)) == [3.0, 4.0, 5.0]
    assert list(array.get_axis(1, 2)) == [2.0, 5.0]
    assert array.get_axis(0, 2) is None
    assert array.get_axis(2, 0) is None
    assert array.get_axis(-1, 0) is None
    assert array.get_axis(0, -1) is None

    with pytest.raises(IndexError):
        array.index_axis(1, 3)


def test_view():
    array = Array(np.arange(24), [2, 3, 4])
    view = array.index_axis(1, 2)
    assert view.dimensions == 2
    assert view.shape == (2, 4)
    assert len(view) == 8
    assert list(view) == [8.0, 9.0, 10.0, 11.0, 20.0, 21.0, 22.0, 23.0]
    assert np.shares_memory(view.numpy(), array.as_slice())

    copy = view.to_array()
    assert copy == Array([8, 9, 10, 11, 20, 21, 22, 23], [2, 4])
    copy[0, 0] = -1.0
    assert array[0, 2, 0] == 8.0


def test_sum():
    array = Array(np.arange(27), [3, 3, 3])
    assert array.sum(0) == Array([27, 30, 33, 36, 39, 42, 45, 48, 51], [3, 3])
    assert array.sum(1) == Array([9, 12, 15, 36, 39, 42, 63, 66, 69], [3, 3])
    assert array.sum(2) == Array([3, 12, 21, 30, 39, 48, 57, 66, 75], [3, 3])

    for axis in range(3):
        assert array.sum(axis).dimensions == 2
        assert np.allclose(
            array.sum(axis).as_slice(),
            array.as_slice().reshape(3, 3, 3).sum(axis=axis).ravel(),
        )

    assert list(Array([1, 2, 3], 3).sum(0)) == [6.0]


def test_iter_indices():
    array = Array.from_zeros([2, 3])
    it = array.iter_indices()
    assert len(it) == 6
    assert next(it) == (0, 0)
    assert next(it) == (0, 1)
    assert next(it) == (0, 2)
    assert len(it) == 3
    assert list(it) == [(1, 0), (1, 1), (1, 2)]
    assert len(it) == 0

    # fresh on every call
    assert len(list(array.iter_indices())) == 6


def test_iter_axis():
    array = Array(np.arange(6), [2, 3])
    it = array.iter_axis(1)
    assert len(it) == 3
    assert [list(view) for view in it] == [[0.0, 3.0], [1.0, 4.0], [2.0, 5.0]]


def test_npy():
    array = Array(np.arange(6), [2, 3])
    f = io.BytesIO()
    array.write_npy(f)
    raw = f.getvalue()
    assert raw.startswith(sfs.array.MAGIC)
    assert np.array_equal(np.load(io.BytesIO(raw)), np.arange(6).reshape(2, 3))

    assert Array.read_npy(io.BytesIO(raw)) == array


def test_npy_dtypes():
    for dtype in [np.int32, np.uint8, np.float32, ">f8"]:
        f = io.BytesIO()
        np.save(f, np.arange(4, dtype=dtype).reshape(2, 2))
        f.seek(0)
        assert Array.read_npy(f) == Array([0, 1, 2, 3], [2, 2])


def test_npy_fortran_order():
    f = io.BytesIO()
    np.save(f, np.asfortranarray(np.arange(6, dtype=float).reshape(2, 3)))
    f.seek(0)
    with pytest.raises(sfs.FormatError):
        Array.read_npy(f)
