from .ticker import after, before

__all__ = ("after", "before")
