from filecheck.schemas.storage import (
    Failure,
    Found,
    LookupResult,
    NotFound,
    ObjectMetadata,
)

__all__ = [
    "Failure",
    "Found",
    "LookupResult",
    "NotFound",
    "ObjectMetadata",
]
