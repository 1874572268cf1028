from typing import List, Optional, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T")

SeedLike = Union[None, int, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Devuelve un generador numpy; reutiliza el recibido si ya lo es."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def shuffle(items: Sequence[T], rng: Optional[np.random.Generator] = None) -> List[T]:
    """Permutación uniforme (Fisher-Yates) de una copia de ``items``.

    Para ``i`` desde el último índice hasta 1 se intercambia ``i`` con un
    índice uniforme en ``[0, i]``.
    """
    rng = make_rng(rng)
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        result[i], result[j] = result[j], result[i]
    return result
