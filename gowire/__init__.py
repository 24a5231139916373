"""Write Go dependency-injector source from described types and provider calls."""

__version__ = "0.1.0"

__all__ = ["gotypes", "naming", "filegen", "injector", "emit", "markers"]