from .signals import POLL_INTERVAL, received, scopes, wait

__all__ = ("POLL_INTERVAL", "received", "scopes", "wait")
