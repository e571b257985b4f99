"""Folio generators for contracts."""

import secrets
import time

from src.domain.interfaces import FolioGenerator
from src.service.lending.settings import lending_settings


class TokenFolioGenerator(FolioGenerator):
    """
    Builds folios from a microsecond timestamp plus random bytes.

    Example: CTR-18C3A9F2B4D10E7A1B
    The timestamp keeps folios ordered by creation; the random suffix
    keeps two folios generated in the same microsecond apart.
    """

    def __init__(self, prefix: str | None = None, random_bytes: int = 3):
        self._prefix = prefix if prefix is not None else lending_settings.folio_prefix
        self._random_bytes = random_bytes

    def generate(self) -> str:
        timestamp = format(time.time_ns() // 1000, "x")
        token = f"{timestamp}{secrets.token_hex(self._random_bytes)}"
        return f"{self._prefix}{token.upper()}"
