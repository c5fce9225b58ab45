"""Dump the codebook, parity-check matrix and weight distribution of a code."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .. import config
from ..code.generator import GeneratorMatrix
from ..utils.seeding import make_rng, seed_all


def load_matrix(path: str) -> np.ndarray:
    """Read a generator matrix from ``.npy`` or a whitespace-separated text file."""

    matrix_path = Path(path)
    if matrix_path.suffix == ".npy":
        matrix = np.load(matrix_path)
    else:
        matrix = np.loadtxt(matrix_path, ndmin=2)
    # Values are left as read so non-binary entries are rejected by the engine.
    return matrix


def _bits(vector: np.ndarray) -> str:
    return "".join(str(int(b)) for b in vector)


def run(args: argparse.Namespace) -> None:
    cfg = config.get_config()
    n = args.n if args.n is not None else cfg.n
    k = args.k if args.k is not None else cfg.k
    seed = args.seed if args.seed is not None else cfg.seed
    seed_all(seed)

    matrix = load_matrix(args.matrix) if args.matrix else None
    code = GeneratorMatrix(n, k, matrix, rng=make_rng(seed))

    output_dir = Path(args.out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_path = output_dir / f"codebook_n{n}_k{k}.csv"
    weights: List[int] = []
    with csv_path.open("w") as f:
        f.write("message,codeword,weight\n")
        for message, codeword in code.codewords():
            weight = int(codeword.sum())
            weights.append(weight)
            f.write(f"{_bits(message)},{_bits(codeword)},{weight}\n")
    print(f"Saved codebook to {csv_path}")

    parity_path = output_dir / f"parity_n{n}_k{k}.npy"
    np.save(parity_path, code.parity_check_matrix().matrix)
    print(f"Saved parity-check matrix to {parity_path}")

    nonzero = [w for w in weights if w > 0]
    if nonzero:
        print(f"Minimum nonzero codeword weight: {min(nonzero)}")

    plot_dir = Path(args.plot_dir)
    plot_dir.mkdir(parents=True, exist_ok=True)
    plot_path = plot_dir / f"weights_n{n}_k{k}.png"
    counts = np.bincount(np.asarray(weights, dtype=np.int64), minlength=n + 1)
    plt.figure(figsize=(6, 4))
    plt.bar(np.arange(n + 1), counts)
    plt.xlabel("Hamming weight")
    plt.ylabel("Codewords")
    plt.title(f"({n}, {k}) weight distribution")
    plt.grid(True, axis="y", ls="--", alpha=0.4)
    plt.tight_layout()
    plt.savefig(plot_path, dpi=200)
    plt.close()
    print(f"Saved weight distribution plot to {plot_path}")


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Report the codebook of a binary linear block code")
    parser.add_argument("--n", type=int, help="Code length")
    parser.add_argument("--k", type=int, help="Code dimension")
    parser.add_argument("--matrix", type=str, help="Generator matrix (.npy or text)")
    parser.add_argument("--seed", type=int, help="Seed for the random parity block")
    parser.add_argument("--out_dir", type=str, default="results")
    parser.add_argument("--plot_dir", type=str, default="plots")
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
