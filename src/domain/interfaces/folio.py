"""Folio generation strategy."""

from abc import ABC, abstractmethod


class FolioGenerator(ABC):
    """
    Produces human-readable contract folios.

    Folios must never repeat within the lifetime of the store.
    """

    @abstractmethod
    def generate(self) -> str:
        """Return a new folio, e.g. "CTR-18C3A9F2B4D10E7A"."""
        ...
