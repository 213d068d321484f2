# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Content-derived issue fingerprints."""

import hashlib
import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class FingerprintRegistry:
    """Track fingerprints already issued in the current run."""

    def __init__(self, fingerprints: Iterable[str] = ()) -> None:
        """Initialize registry.

        Args:
            fingerprints: Fingerprints to treat as already issued.
        """
        self._fingerprints: set[str] = set(fingerprints)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._fingerprints

    def __len__(self) -> int:
        return len(self._fingerprints)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fingerprints)

    def add(self, fingerprint: str) -> None:
        """Register one issued fingerprint."""
        self._fingerprints.add(fingerprint)

    def seed(self, fingerprints: Iterable[str]) -> int:
        """Register fingerprints issued by a previous run.

        Args:
            fingerprints: Fingerprints loaded from an existing report.

        Returns:
            Number of fingerprints that were not already registered.
        """
        before = len(self._fingerprints)
        self._fingerprints.update(fingerprints)
        return len(self._fingerprints) - before


def create_fingerprint(path: str, message: str, registry: FingerprintRegistry) -> str:
    """Create a fingerprint unique within ``registry`` and register it.

    The first occurrence of a ``(path, message)`` pair yields the MD5 digest of
    ``path + message``. Repeats extend the running hash with the previous
    digest until an unused value is found.

    Args:
        path: Path of the file the diagnostic was reported for.
        message: Diagnostic message.
        registry: Fingerprints already issued; updated in place.

    Returns:
        Hex digest fingerprint.
    """
    md5 = hashlib.md5()  # noqa: S324
    md5.update(path.encode("utf-8"))
    md5.update(message.encode("utf-8"))
    fingerprint = md5.hexdigest()

    rehash_count = 0
    while fingerprint in registry:
        md5.update(fingerprint.encode("utf-8"))
        fingerprint = md5.hexdigest()
        rehash_count += 1

    if rehash_count:
        logger.debug(
            f"Fingerprint collision resolved (path={path} rehash_count={rehash_count})"
        )
    registry.add(fingerprint)
    return fingerprint
