from __future__ import annotations
import logging
import math
from typing import Optional, Tuple, Union
import torch
import torch.nn.functional as F

from tensor_ext.errors import DTypeError, ShapeError
from tensor_ext.ops.logical import logical_not
from tensor_ext.ops.triangular import tril_mask
from tensor_ext.shapes import broadcast_shapes, require_broadcastable_to, require_ndim
from tensor_ext.types import AttentionParams

logger = logging.getLogger(__name__)

# uint8 masks are keep-masks (nonzero = attend), like bool
_KEEP_MASK_DTYPES = (torch.bool, torch.uint8)


def _scores_shape(q: torch.Tensor, k: torch.Tensor, v: torch.Tensor) -> Tuple[int, ...]:
    require_ndim(q, 2, "query")
    require_ndim(k, 2, "key")
    require_ndim(v, 2, "value")
    if not (q.is_floating_point() and k.is_floating_point() and v.is_floating_point()):
        raise DTypeError(f"attention expects floating point inputs, got {q.dtype}, {k.dtype}, {v.dtype}")
    if not q.dtype == k.dtype == v.dtype:
        raise DTypeError(f"query, key and value dtypes differ: {q.dtype}, {k.dtype}, {v.dtype}")

    Tq, Dq = q.shape[-2:]
    Tk, Dk = k.shape[-2:]
    Tv = v.shape[-2]
    if Dq != Dk:
        raise ShapeError(f"query and key head dims differ: {tuple(q.shape)} vs {tuple(k.shape)}")
    if Tk != Tv:
        raise ShapeError(f"key and value sequence lengths differ: {tuple(k.shape)} vs {tuple(v.shape)}")
    if Tk == 0:
        raise ShapeError("key sequence is empty; every query row would be fully masked")
    if Dq == 0:
        raise ShapeError("head dim must be positive")

    batch = broadcast_shapes(q.shape[:-2], k.shape[:-2], v.shape[:-2])
    return batch + (Tq, Tk)


def _stable_softmax(scores: torch.Tensor) -> torch.Tensor:
    # Fully masked rows (all -inf) get zero weights instead of NaN.
    row_max = scores.amax(dim=-1, keepdim=True)
    dead = torch.isneginf(row_max)
    if logger.isEnabledFor(logging.DEBUG) and bool(dead.any()):
        logger.debug("%d fully masked query rows receive zero attention", int(dead.sum()))
    e = torch.exp(scores - row_max.masked_fill(dead, 0.0))
    denom = e.sum(dim=-1, keepdim=True)
    return e / denom.masked_fill(dead, 1.0)


def scaled_dot_product_attention(
    query: torch.Tensor,
    key: torch.Tensor,
    value: torch.Tensor,
    params: Optional[AttentionParams] = None,
    *,
    need_weights: bool = False,
) -> Union[torch.Tensor, Tuple[torch.Tensor, torch.Tensor]]:
    """softmax(query @ key^T * scale + mask) @ value.

    query: (..., Tq, D), key: (..., Tk, D), value: (..., Tk, Dv); leading dims
    broadcast. Returns (..., Tq, Dv), plus the (..., Tq, Tk) attention weights
    when `need_weights` is set.

    Scores are masked and normalized in at least float32 (float64 inputs stay
    float64), then cast back to the input dtype. A bool or uint8 `attn_mask`
    marks positions to attend (True / nonzero); any other real mask is added
    to the scores.

    Dropout only runs when `params.training` is True; at inference a nonzero
    `dropout_p` is ignored. With dropout active, the weights returned by
    `need_weights` are the post-dropout ones and do not sum to 1.
    """
    p = params if params is not None else AttentionParams()
    shape = _scores_shape(query, key, value)
    Tq, Tk = shape[-2:]
    D = query.shape[-1]
    scale = p.scale if p.scale is not None else (1.0 / math.sqrt(D))
    logger.debug(
        "sdpa q=%s k=%s v=%s scale=%g causal=%s mask=%s",
        tuple(query.shape), tuple(key.shape), tuple(value.shape), scale, p.is_causal,
        None if p.attn_mask is None else tuple(p.attn_mask.shape),
    )

    mask = None
    if p.attn_mask is not None:
        mask = p.attn_mask
        require_broadcastable_to(mask.shape, shape, "attn_mask")
        if mask.is_complex():
            raise DTypeError(f"attn_mask must be bool or real-valued, got {mask.dtype}")

    # scores: (..., Tq, Tk)
    scores = torch.matmul(query, key.transpose(-2, -1)) * scale
    acc = torch.promote_types(scores.dtype, torch.float32)
    # value's batch dims may be wider than query/key's
    scores = scores.to(acc).expand(shape)

    if p.is_causal:
        keep = tril_mask(Tq, Tk, 0, device=scores.device)
        scores = scores.masked_fill(~keep, float("-inf"))
    elif mask is not None:
        mask = mask.to(scores.device)
        if mask.dtype in _KEEP_MASK_DTYPES:
            scores = scores.masked_fill(logical_not(mask).bool(), float("-inf"))
        else:
            scores = scores + mask.to(acc)

    attn = _stable_softmax(scores).to(query.dtype)

    if p.dropout_p > 0:
        if p.training:
            attn = F.dropout(attn, p=p.dropout_p, training=True)
        else:
            logger.debug("dropout_p=%g ignored outside training", p.dropout_p)

    out = torch.matmul(attn, value)  # (..., Tq, Dv)
    if need_weights:
        return out, attn
    return out
