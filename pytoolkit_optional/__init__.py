from .exceptions import NoSuchElementError
from .metadata import NAME, VERSION
from .optional import (
    ABSENT,
    Consumer,
    Mapper,
    NilType,
    Optional,
    Predicate,
    Supplier,
    is_nil,
)

__version__ = VERSION

__all__ = [
    "ABSENT",
    "Consumer",
    "Mapper",
    "NAME",
    "NilType",
    "NoSuchElementError",
    "Optional",
    "Predicate",
    "Supplier",
    "is_nil",
    "__version__",
]
