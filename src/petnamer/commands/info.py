from typing_extensions import Optional

from .. import Alliterations, GenerateConfig, WordStore


def info(
    config: GenerateConfig,
    max_words: int = 4,
    store: Optional[WordStore] = None,
) -> dict:
    """
    Collect information about the word lists a config points at.

    :param config: :class:`petnamer.resources.config.GenerateConfig`.
    :param max_words: Largest word count to report cardinality for,
        defaults to 4.
    :param store: Word store to use instead of loading the config's, defaults
        to None.
    :return: Returns json object with list sizes and cardinalities.
    """
    if store is None:
        store = config.store()
    else:
        store = WordStore(store.adjectives, store.adverbs, store.nouns)

    if config.letters > 0:
        store.retain(lambda w: len(w) <= config.letters)

    i = {
        'source': config.directory if config.directory else config.lists,
        'sizes': store.sizes(),
        'cardinality': {
            w: store.cardinality(w) for w in range(max_words + 1)
        },
    }

    request = config.request
    if request.alliterating:
        alliterations = Alliterations(store, config.log)
        if request.fixed_letter is not None:
            alliterations.retain(lambda k, _: k == request.fixed_letter)
        i['letters'] = alliterations.letters()
        i['alliterating'] = {
            w: alliterations.cardinality(w) for w in range(max_words + 1)
        }

    return i
