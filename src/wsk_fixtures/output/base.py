"""Shared manifest-writing flow.

ManifestWriter turns descriptors into manifest dicts and prepares the
output directory; subclasses decide how the manifests are laid out on disk.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wsk_fixtures.config import DEFAULT_NAMESPACE
from wsk_fixtures.serializers import action_to_manifest

if TYPE_CHECKING:
    from wsk_fixtures.descriptor import ActionDescriptor

logger = logging.getLogger("wsk_fixtures")


class ManifestWriter(ABC):
    """Base class for manifest writers.

    Subclasses must implement emit().
    """

    def write(
        self,
        actions: list[ActionDescriptor],
        output_dir: str,
        dry_run: bool = False,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> list[dict[str, Any]]:
        """Build manifests for *actions* and write them under *output_dir*.

        Nothing is written when *dry_run* is set or *actions* is empty.

        Returns:
            The manifest dicts, in the order of *actions*.
        """
        manifests = [action_to_manifest(a) for a in actions]
        if dry_run or not manifests:
            return manifests

        output_path = Path(output_dir).resolve()
        output_path.mkdir(parents=True, exist_ok=True)
        for file_path in self.emit(manifests, output_path, namespace):
            logger.debug("Written: %s", file_path)
        return manifests

    @abstractmethod
    def emit(self, manifests: list[dict[str, Any]], output_path: Path, namespace: str) -> list[Path]:
        """Write *manifests* into the existing *output_path*.

        Returns:
            Paths of the files written.
        """
        ...
