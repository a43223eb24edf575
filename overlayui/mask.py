"""Hit masks computed from the alpha channel of RGBA images."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional


def alpha_mask(
    pixels: bytes,
    width: int,
    height: int,
    threshold: int,
    workers: Optional[int] = None,
) -> List[bool]:
    """Flag every pixel whose alpha is below ``threshold``, row by row.

    ``pixels`` holds ``width * height`` RGBA pixels. The rows are split
    between ``workers`` threads (by default one per CPU).
    """
    if width < 0 or height < 0:
        raise ValueError("image size must not be negative")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if len(pixels) < width * height * 4:
        raise ValueError("pixel data is shorter than width * height RGBA pixels")

    alphas = bytes(pixels[3 : width * height * 4 : 4])
    rows_per_worker = height // workers

    def rows(worker: int) -> List[bool]:
        start = worker * rows_per_worker
        end = height if worker == workers - 1 else start + rows_per_worker
        return [alpha < threshold for alpha in alphas[start * width : end * width]]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        parts = list(executor.map(rows, range(workers)))
    return [flag for part in parts for flag in part]