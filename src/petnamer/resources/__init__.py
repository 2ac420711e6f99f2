from .log import Log
from .errors import PetnameError, CapabilityUnavailable, InvalidRequest
from .errors import NoCandidates
from .words import WordStore, Categories, Tiers
from .request import Request
from .generator import Generator, Names, generate, iter_names, petname
from .alliterations import Alliterations, AlliterationNames
from .config import ApplicationConfig, GenerateConfig
