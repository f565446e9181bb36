from __future__ import annotations
import torch

from tensor_ext.errors import DTypeError


def logical_not(x: torch.Tensor) -> torch.Tensor:
    """Elementwise logical complement.

    Truthiness rule:
      * bool tensors are complemented and stay bool.
      * integer tensors treat zero as false and nonzero as true; the result
        keeps the input dtype and holds only 0 and 1.
      * floating tensors are accepted only when every element is 0 or 1; the
        result keeps the input dtype.
      * complex tensors have no boolean interpretation and raise DTypeError.
    """
    if x.dtype == torch.bool:
        return ~x
    if x.is_complex():
        raise DTypeError(f"logical_not has no boolean interpretation for dtype {x.dtype}")
    if x.is_floating_point():
        if not torch.all((x == 0) | (x == 1)):
            raise DTypeError(f"logical_not on {x.dtype} requires every element to be 0 or 1")
    return (x == 0).to(x.dtype)
