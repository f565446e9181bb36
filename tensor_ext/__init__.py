"""PyTorch functions missing from the host library: triangular masks,
logical negation, constant broadcasting and scaled dot-product attention."""
from __future__ import annotations
import logging

from tensor_ext.errors import CastError, ConfigError, DTypeError, ShapeError, TensorExtError
from tensor_ext.ops import (
    allclose,
    equal,
    eye,
    logical_not,
    masked_fill,
    outer,
    scaled_dot_product_attention,
    tril,
    tril_mask,
    triu,
    triu_mask,
    values_like,
)
from tensor_ext.shapes import broadcast_shapes
from tensor_ext.types import AttentionParams, CastPolicy

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
