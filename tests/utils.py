# tests/utils.py
"""
Small, reusable helpers used across the kplusplus test suite.

Functions:
- to_numpy(x): detach a tensor (or pass an array through) as numpy.
- labels_equal_up_to_perm(y1, y2, K): compare clusterings ignoring label names.
- sorted_rows(C): rows of a center matrix in lexicographic order.
- partition(labels): the clustering as a set of frozensets of point indices.
"""

from __future__ import annotations

import itertools
from typing import FrozenSet, Set, Union

import numpy as np
import torch

ArrayLike = Union[np.ndarray, torch.Tensor]


def to_numpy(x: ArrayLike) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def labels_equal_up_to_perm(y1: ArrayLike, y2: ArrayLike, K: int) -> bool:
    """Return True if y2 can be relabelled to equal y1 exactly."""
    y1 = to_numpy(y1)
    y2 = to_numpy(y2)
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False


def sorted_rows(C: ArrayLike) -> np.ndarray:
    """Sort rows lexicographically so center sets compare without label order."""
    C = to_numpy(C)
    order = np.lexsort(C.T[::-1])
    return C[order]


def partition(labels: ArrayLike) -> Set[FrozenSet[int]]:
    labels = to_numpy(labels)
    groups = {}
    for i, lab in enumerate(labels.tolist()):
        groups.setdefault(lab, set()).add(i)
    return {frozenset(g) for g in groups.values()}
