from .index import zip_index
from .policy import ZipPolicy, zip_all, zip_left, zip_right, zip_shortest, zipM

__all__ = (
    "ZipPolicy",
    "zip_index",
    "zip_shortest",
    "zip_left",
    "zip_right",
    "zip_all",
    # Generic
    "zipM",
)
