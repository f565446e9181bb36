import pytest
import torch


@pytest.fixture()
def device_and_dtype():
    device = "cuda" if torch.cuda.is_available() else "cpu"
    dtype = torch.float16 if device == "cuda" else torch.float32
    return device, dtype


@pytest.fixture()
def tolerances(device_and_dtype):
    _, dtype = device_and_dtype
    if dtype == torch.float16:
        return dict(atol=2e-2, rtol=2e-2)
    return dict(atol=1e-4, rtol=1e-4)
