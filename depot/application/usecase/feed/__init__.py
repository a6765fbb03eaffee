"""Feed use cases."""

from .get_updates import GetUpdatesUseCase

__all__ = ["GetUpdatesUseCase"]
