import pytest
import torch

from tensor_ext import ShapeError, broadcast_shapes
from tensor_ext.shapes import require_broadcastable_to, require_ndim


@pytest.mark.parametrize(
    "shapes",
    [
        [(3, 1, 4), (5, 1)],
        [(1,), (2, 3)],
        [(), (4, 4)],
        [(2, 1, 3), (1, 4, 1), (4, 3)],
        [(0, 3), (1, 3)],
        [],
    ],
)
def test_matches_torch(shapes):
    assert broadcast_shapes(*shapes) == tuple(torch.broadcast_shapes(*shapes))


@pytest.mark.parametrize("shapes", [[(2, 3), (3, 3)], [(4,), (5,)], [(2, 1), (3, 1, 1), (1, 4, 3)]])
def test_incompatible(shapes):
    with pytest.raises(ShapeError):
        broadcast_shapes(*shapes)


def test_broadcastable_to():
    require_broadcastable_to((4, 4), (2, 3, 4, 4))
    require_broadcastable_to((2, 1, 4, 1), (2, 3, 4, 4))
    with pytest.raises(ShapeError):
        require_broadcastable_to((1, 2, 3, 4, 4), (2, 3, 4, 4))
    with pytest.raises(ShapeError):
        # would enlarge the target
        require_broadcastable_to((5, 4), (1, 4))


def test_require_ndim():
    require_ndim(torch.zeros(2, 3), 2)
    with pytest.raises(ShapeError, match="at least 2 dims"):
        require_ndim(torch.zeros(3), 2, "x")
