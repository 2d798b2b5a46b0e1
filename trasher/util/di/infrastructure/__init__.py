"""Infrastructure providers."""

# Import bases
from .censor import CensorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .censor import ProdCensorProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CensorProvider",
    "PersistenceProvider",
    "ProdCensorProvider",
    "ProdPersistenceProvider",
]
