"""Deterministic seeding helpers."""

from __future__ import annotations

import os
import random

import numpy as np


def seed_all(seed: int) -> None:
    """Seed Python and NumPy global RNGs."""

    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a NumPy generator; ``None`` draws fresh OS entropy."""

    return np.random.default_rng(seed)


__all__ = ["seed_all", "make_rng"]
