import os
import json

from abc import ABC, abstractmethod
from typing_extensions import Optional

from dataclasses import dataclass, field

from .log import Log
from .request import Request
from .rng import default_rng
from .words import WordStore, Tiers
from .. import __version__


@dataclass(kw_only=True)
class Config(ABC):
    """Base config"""

    log: Log = field(default_factory=lambda: Log('INFO'))
    """Log object."""
    debug: bool = field(default=False)
    """Debug flag."""

    def to_json(self):
        keys = self.__dataclass_fields__.keys()
        d = {}
        for k in keys:
            d[k] = self.__dict__[k]
        if not isinstance(d['log'], dict):
            d['log'] = d['log'].to_json()
        return d

    @classmethod
    def from_json(self, data: dict):
        return self.from_string(json.dumps(data))

    @classmethod
    @abstractmethod
    def from_string(self, data: str):
        raise NotImplementedError

    def __repr__(self):
        return json.dumps(self.to_json())


@dataclass
class ApplicationConfig(Config):
    """Base application config"""

    # Dask configuration
    scheduler: str = field(default='single-threaded')
    """Dask scheduler: 'single-threaded', 'threads', 'processes' or
    'distributed', defaults to 'single-threaded'"""
    workers: int = field(default=4)
    """Number of dask workers, and of batch tasks"""
    threads: int = field(default=1)
    """Number of threads per dask worker"""
    watch: bool = field(default=False)
    """Open dask diagnostic page in default web browser"""

    @classmethod
    def from_string(cls, data: str):
        x = json.loads(data)
        n = cls(
            log=Log(**x['log']) if 'log' in x else Log('INFO'),
            debug=x['debug'],
            scheduler=x['scheduler'],
            workers=x['workers'],
            threads=x['threads'],
            watch=x['watch'],
        )
        return n

    def __repr__(self):
        return json.dumps(self.to_json())


@dataclass
class GenerateConfig(Config):
    """Config for generating one or more names."""

    words: int = field(default=2)
    """Number of words in each name, defaults to 2"""
    separator: str = field(default='-')
    """Separator between words, defaults to '-'"""
    letters: int = field(default=0)
    """Maximum letters per word, 0 for unlimited, defaults to 0"""
    alliterate: bool = field(default=False)
    """Words share the first letter of the first word, defaults to False"""
    alliterate_with: Optional[str] = field(default=None)
    """Words all begin with this letter, defaults to None"""
    lists: str = field(default='small')
    """Built-in word list tier, one of 'small', 'medium', 'large'"""
    directory: Optional[str] = field(default=None)
    """Directory of custom word lists. Used instead of the built-in lists
    when set, defaults to None"""
    count: int = field(default=1)
    """Number of names to generate, defaults to 1"""
    stream: bool = field(default=False)
    """Generate names until stopped, defaults to False"""
    seed: Optional[int] = field(default=None)
    """Seed for repeatable names, defaults to None"""
    version: str = field(default=__version__)
    """petnamer version"""

    def __post_init__(self) -> None:
        if isinstance(self.lists, int) and not isinstance(self.lists, bool):
            if 0 <= self.lists < len(Tiers):
                self.lists = Tiers[self.lists]
        if self.lists not in Tiers:
            raise ValueError(
                f'Invalid word lists ({self.lists}). Must be one of {Tiers}.'
            )
        if self.count < 0:
            raise ValueError(f'Invalid count ({self.count}). Must be 0 or more.')
        if self.directory is not None:
            self.directory = os.path.abspath(self.directory)
        # validates word options
        _ = self.request

    @property
    def request(self) -> Request:
        return Request(
            words=self.words,
            separator=self.separator,
            letters=self.letters,
            alliterate=self.alliterate,
            alliterate_with=self.alliterate_with,
        )

    def store(self) -> WordStore:
        """Load the word store this config points at."""
        if self.directory is not None:
            self.log.debug(f"Loading word lists from '{self.directory}'")
            return WordStore.from_dir(self.directory)
        self.log.debug(f"Loading built-in '{self.lists}' word lists")
        return WordStore.default(self.lists)

    def rng(self):
        return default_rng(self.seed)

    @classmethod
    def from_dict(cls, data: dict):
        x = data
        if 'log' in x:
            l = x['log']  # noqa: E741
            log = Log(
                l['log_level'], l['logdir'], l['logtype'], l['logfilename']
            )
        else:
            log = Log('INFO')

        return cls(
            log=log,
            debug=x.get('debug', False),
            words=x['words'],
            separator=x['separator'],
            letters=x['letters'],
            alliterate=x['alliterate'],
            alliterate_with=x['alliterate_with'],
            lists=x['lists'],
            directory=x['directory'],
            count=x['count'],
            stream=x['stream'],
            seed=x['seed'],
            version=x.get('version', __version__),
        )

    @classmethod
    def from_string(cls, data: str):
        x = json.loads(data)
        return cls.from_dict(x)

    def __eq__(self, other):
        # We don't compare logs
        for k in other.__dict__.keys():
            if k != 'log':
                if self.__dict__[k] != other.__dict__[k]:
                    return False
        return True

    def __repr__(self):
        return json.dumps(self.to_json())
