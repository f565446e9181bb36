from __future__ import annotations

import argparse
from pathlib import Path

import torch
import torch.nn.functional as F
import triton.testing as tt

from tensor_ext import AttentionParams
from tensor_ext.ops import scaled_dot_product_attention


DEVICE = torch.device("cuda" if torch.cuda.is_available() else "cpu")
DTYPE = torch.float16 if DEVICE.type == "cuda" else torch.float32
PLOT_NAME = "attention-performance"


def _attention_flops(B: int, H: int, T: int, D: int) -> int:
    # QK^T and Attn*V matmuls; softmax cost is ignored. Causal work is not skipped.
    return 4 * B * H * T * T * D


def make_benchmark(causal: bool):
    bench = tt.Benchmark(
        x_names=["T"],
        x_vals=[128 * i for i in range(2, 17)],  # 256 -> 2048
        line_arg="provider",
        line_vals=["torch-sdpa", "tensor-ext"],
        line_names=["Torch SDPA", "tensor_ext"],
        styles=[("green", "-"), ("blue", "-")],
        ylabel="TFLOP/s",
        plot_name=f"{PLOT_NAME}-{'causal' if causal else 'full'}",
        args={"B": 4, "H": 8, "D": 64},
    )

    @tt.perf_report(bench)
    def benchmark(B: int, H: int, T: int, D: int, provider: str) -> float:
        torch.manual_seed(0)
        q = torch.randn(B, H, T, D, device=DEVICE, dtype=DTYPE)
        k = torch.randn(B, H, T, D, device=DEVICE, dtype=DTYPE)
        v = torch.randn(B, H, T, D, device=DEVICE, dtype=DTYPE)

        if provider == "torch-sdpa":
            ms = tt.do_bench(lambda: F.scaled_dot_product_attention(q, k, v, is_causal=causal))
        elif provider == "tensor-ext":
            p = AttentionParams(is_causal=causal)
            ms = tt.do_bench(lambda: scaled_dot_product_attention(q, k, v, p))
        else:
            raise ValueError(f"Unknown provider '{provider}'")

        return _attention_flops(B, H, T, D) * 1e-9 / ms

    return benchmark


def main(save_dir: str, causal: bool) -> None:
    if DEVICE.type != "cuda":
        raise RuntimeError("CUDA is required to run this benchmark.")

    output_dir = Path(save_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    bench = make_benchmark(causal)

    print(f"Running attention benchmark on {DEVICE} with dtype={DTYPE}, causal={causal}.")
    bench.run(print_data=True, show_plots=False, save_path=str(output_dir))

    print(f"Benchmark plots saved to {output_dir}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark tensor_ext attention against torch SDPA.")
    parser.add_argument(
        "--save-dir",
        default="benchmark_output",
        help="Directory where benchmark plots will be saved.",
    )
    parser.add_argument(
        "--causal",
        action="store_true",
        help="Benchmark with causal masking.",
    )
    args = parser.parse_args()
    main(args.save_dir, args.causal)
