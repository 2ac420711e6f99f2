import itertools

from typing_extensions import Optional

from .. import GenerateConfig, Generator, Names, WordStore


def names(config: GenerateConfig, store: Optional[WordStore] = None) -> Names:
    """
    Create an unbounded iterator of names for a config.

    :param config: :class:`petnamer.resources.config.GenerateConfig`.
    :param store: Word store to use instead of loading the config's, defaults
        to None.
    :return: :class:`petnamer.resources.generator.Names` iterator.
    """
    if store is None:
        store = config.store()
    config.log.debug(f'Word list sizes: {store.sizes()}')
    return Generator(store, config.log).iter(config.rng(), config.request)


def generate(
    config: GenerateConfig, store: Optional[WordStore] = None
) -> list[str]:
    """
    Generate config.count names.

    :param config: :class:`petnamer.resources.config.GenerateConfig`.
    :param store: Word store to use instead of loading the config's, defaults
        to None.
    :raises NoCandidates: Filters leave a slot without words.
    :return: List of generated names.
    """
    config.log.debug(f'Generating {config.count} names with {config.request}')
    return list(itertools.islice(names(config, store), config.count))
