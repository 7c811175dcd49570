"""Abstract interfaces implemented by the infrastructure layer."""
from .repository import IRepository

__all__ = ["IRepository"]
