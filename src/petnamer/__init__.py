__version__ = '1.0.0'

from .resources.log import Log
from .resources.errors import PetnameError, CapabilityUnavailable
from .resources.errors import InvalidRequest, NoCandidates
from .resources.words import WordStore, Categories, Tiers
from .resources.request import Request
from .resources.rng import default_rng
from .resources.generator import Generator, Names
from .resources.generator import generate, iter_names, petname
from .resources.alliterations import Alliterations, AlliterationNames
from .resources.config import ApplicationConfig, GenerateConfig
