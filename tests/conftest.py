import pytest

from typing_extensions import Generator

from petnamer import Log, WordStore, GenerateConfig, ApplicationConfig

# pull together fixtures
pytest_plugins = [
    'fixtures.word_fixtures',
    'fixtures.rng_fixtures',
    'fixtures.cli_fixtures',
    'fixtures.dask_fixtures',
]


@pytest.fixture(scope='session', autouse=True)
def log() -> Generator[Log, None, None]:
    # create the shared handler before any CliRunner swaps out the streams
    yield Log('INFO')


@pytest.fixture(scope='function')
def app_config(log: Log) -> Generator[ApplicationConfig, None, None]:
    yield ApplicationConfig(log=log, scheduler='single-threaded', workers=2)


@pytest.fixture(scope='function')
def generate_config(
    log: Log, words_dir: str
) -> Generator[GenerateConfig, None, None]:
    yield GenerateConfig(
        log=log,
        directory=words_dir,
        words=3,
        separator='.',
        count=10,
        seed=1234,
    )


@pytest.fixture(scope='function')
def default_config(log: Log) -> Generator[GenerateConfig, None, None]:
    yield GenerateConfig(log=log, lists='small', count=5, seed=42)


@pytest.fixture(scope='session')
def seed() -> Generator[int, None, None]:
    yield 20240601


@pytest.fixture(scope='function')
def scenario_store() -> Generator[WordStore, None, None]:
    yield WordStore.with_words(['blue', 'brave'], ['quickly'], ['fox'])
