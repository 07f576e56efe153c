from .config import IdenticonConfig
from .errors import ConfigurationError, IdenticonError, MalformedDigestError, MissingStageError
from .models import GridCell, Image
from .pipeline.generate_identicon import build_identicon, generate

__all__ = [
    "ConfigurationError",
    "GridCell",
    "IdenticonConfig",
    "IdenticonError",
    "Image",
    "MalformedDigestError",
    "MissingStageError",
    "build_identicon",
    "generate",
]
