import numpy as np

from dask import compute
from dask.delayed import delayed
from typing_extensions import Optional

from .. import GenerateConfig, Generator, Request, WordStore, default_rng


def generate_chunk(
    store: WordStore,
    request: Request,
    seed: np.random.SeedSequence,
    count: int,
) -> list[str]:
    """
    Generate a run of names with a randomness source of its own.

    :param store: Word store, shared read-only between chunks.
    :param request: Generation parameters.
    :param seed: Seed sequence for this chunk's randomness source.
    :param count: Number of names to generate.
    :return: Generated names.
    """
    rng = default_rng(seed)
    g = Generator(store)
    return [g.generate(rng, request) for _ in range(count)]


def split_count(count: int, tasks: int) -> list[int]:
    """Split count into at most `tasks` near-equal, non-empty parts."""
    tasks = max(1, min(tasks, count))
    size, extra = divmod(count, tasks)
    return [size + (1 if i < extra else 0) for i in range(tasks)]


def batch(
    config: GenerateConfig,
    tasks: int = 4,
    store: Optional[WordStore] = None,
) -> list[str]:
    """
    Generate config.count names in parallel with dask. Each task gets an
    independent randomness source spawned from the config's seed, so the
    result is repeatable for a given seed and task count regardless of the
    scheduler in use.

    :param config: :class:`petnamer.resources.config.GenerateConfig`.
    :param tasks: Number of dask tasks to split the work into, defaults to 4.
    :param store: Word store to use instead of loading the config's, defaults
        to None.
    :raises NoCandidates: Filters leave a slot without words.
    :return: Generated names, in task order.
    """
    if config.count == 0:
        return []
    if store is None:
        store = config.store()

    request = config.request
    counts = split_count(config.count, tasks)
    seeds = np.random.SeedSequence(config.seed).spawn(len(counts))
    config.log.debug(
        f'Generating {config.count} names over {len(counts)} tasks'
    )

    d_store = delayed(store)
    chunks = [
        delayed(generate_chunk)(d_store, request, s, c)
        for s, c in zip(seeds, counts)
    ]
    results = compute(*chunks)
    names = [name for chunk in results for name in chunk]
    config.log.info(f'Generated {len(names)} names over {len(counts)} tasks')

    return names
