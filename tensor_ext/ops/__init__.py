from __future__ import annotations

from tensor_ext.ops.attention import scaled_dot_product_attention
from tensor_ext.ops.compare import allclose, equal
from tensor_ext.ops.creation import eye, values_like
from tensor_ext.ops.linalg import outer
from tensor_ext.ops.logical import logical_not
from tensor_ext.ops.masking import masked_fill
from tensor_ext.ops.triangular import tril, tril_mask, triu, triu_mask

__all__ = [
    "allclose",
    "equal",
    "eye",
    "logical_not",
    "masked_fill",
    "outer",
    "scaled_dot_product_attention",
    "tril",
    "tril_mask",
    "triu",
    "triu_mask",
    "values_like",
]
