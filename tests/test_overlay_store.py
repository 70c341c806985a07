from overlay_store import OverlayStore
from shapes import Shape, ShapeKind
from stamps import Stamp


def rect(x):
    return Shape(x, 0, 1, 1, ShapeKind.RECTANGLE, (0, 0, 0), (0, 0, 0), 1)


def test_iteration_keeps_insertion_order(catalog):
    store = OverlayStore()
    stamps = [Stamp(catalog[name], i, i) for i, name in enumerate(["hat", "glasses", "santa"])]
    for stamp in stamps:
        store.add_stamp(stamp)
    assert list(store.iter_stamps()) == stamps


def test_iteration_is_restartable():
    store = OverlayStore()
    store.add_shape(rect(1))
    store.add_shape(rect(2))
    assert [s.x for s in store.iter_shapes()] == [1, 2]
    assert [s.x for s in store.iter_shapes()] == [1, 2]


def test_added_shape_is_frozen():
    store = OverlayStore()
    shape = rect(1)
    store.add_shape(shape)
    assert shape.frozen


def test_counts_and_reset(catalog):
    store = OverlayStore()
    store.add_stamp(Stamp(catalog["hat"], 1, 1))
    store.add_stamp(Stamp(catalog["hat"], 2, 2))
    store.add_shape(rect(1))
    assert (store.stamp_count, store.shape_count) == (2, 1)

    store.reset()
    assert list(store.iter_stamps()) == []
    assert list(store.iter_shapes()) == []
    assert (store.stamp_count, store.shape_count) == (0, 0)
