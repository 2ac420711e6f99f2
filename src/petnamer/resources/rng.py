"""
Randomness sources.

Generation never reaches for global state; every draw goes through a source
handed in by the caller. Two shapes are understood:

* numpy style, ``integers(high)`` returning a value in ``[0, high)``, e.g.
  :class:`numpy.random.Generator`.
* standard library style, ``randrange(stop)``, e.g. :class:`random.Random`.
"""

import numpy as np

from typing_extensions import Any, Optional, Sequence, TypeVar, Union

T = TypeVar('T')


def default_rng(seed: Optional[Union[int, np.random.SeedSequence]] = None):
    """
    Create the default randomness source.

    :param seed: Seed or SeedSequence for repeatable names, defaults to None.
    :return: :class:`numpy.random.Generator`
    """
    return np.random.default_rng(seed)


def index(rng: Any, n: int) -> int:
    """
    Draw an index uniformly distributed over ``[0, n)``.

    :param rng: Randomness source.
    :param n: Size of the population, must be positive.
    :raises TypeError: Source doesn't expose integers() or randrange().
    :return: Drawn index.
    """
    if n <= 0:
        raise ValueError(f'Cannot draw an index from an empty range ({n}).')
    if hasattr(rng, 'integers'):
        return int(rng.integers(n))
    if hasattr(rng, 'randrange'):
        return int(rng.randrange(n))
    raise TypeError(
        f'{type(rng).__name__!r} is not a randomness source; expected an'
        ' object with integers() or randrange().'
    )


def choose(rng: Any, population: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence."""
    return population[index(rng, len(population))]
