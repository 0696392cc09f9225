"""Base handler for complex obs stored as files."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import structlog

from complex_obs.domain.entities.obs import Obs
from complex_obs.domain.value_objects import SEPARATOR, ObsView
from complex_obs.infrastructure.logging import get_logger
from complex_obs.infrastructure.metrics import ComplexObsMetrics, get_metrics
from complex_obs.ports.outbound import ComplexDataStoragePort


class AbstractHandler(ABC):
    """Shared file naming, lookup and purge logic for file-backed handlers.

    Subclasses decide how payloads are read and written; this class
    decides where they live.
    """

    def __init__(
        self,
        storage: ComplexDataStoragePort,
        default_extension: str = "dat",
        metrics: ComplexObsMetrics | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        """Initialize handler.

        Args:
            storage: Where payload files are kept.
            default_extension: Extension used when the title has none.
            metrics: Metrics collector (process-wide default if omitted).
            logger: Logger (component-bound default if omitted).
        """
        self.storage = storage
        self.default_extension = default_extension.lstrip(".")
        self._metrics = metrics or get_metrics()
        self._logger = logger or get_logger(type(self).__name__)

    @abstractmethod
    def get_handler_type(self) -> str:
        """Name of this handler type."""
        ...

    def get_supported_views(self) -> list[str]:
        """View names this handler understands."""
        return [ObsView.RAW.value]

    def supports_view(self, view: str) -> bool:
        """Check if a view name is supported (case-insensitive)."""
        return view.lower() in (v.lower() for v in self.get_supported_views())

    def validate(self, handler_config: Optional[str], obs: Obs) -> bool:
        """Check an obs against handler configuration.

        File-backed handlers accept every obs.
        """
        return True

    def get_value(self, obs: Obs) -> Any:
        """Persisted value projection; file-backed handlers have none."""
        return None

    def output_filename(self, obs: Obs) -> str:
        """Choose the file name a new payload is written to.

        The name is ``<title stem>_<obs uuid><ext>``, or ``<obs uuid><ext>``
        when the title has no stem. ``ext`` comes from the title, falling
        back to the default extension. Separator characters become
        underscores. A numeric suffix is added while the
        name is taken so existing files are never overwritten.

        Args:
            obs: Observation carrying complex_data.

        Returns:
            Unused file name.
        """
        title = obs.complex_data.title if obs.complex_data and obs.complex_data.title else ""
        stem, ext = os.path.splitext(Path(title).name.replace(SEPARATOR, "_"))
        if not ext or ext == ".":
            ext = f".{self.default_extension}"

        base = f"{stem}_{obs.uuid}" if stem.strip() else obs.uuid
        filename = f"{base}{ext}"
        counter = 0
        while self.storage.exists(filename):
            counter += 1
            filename = f"{base}_{counter}{ext}"
        return filename

    def complex_data_path(self, obs: Obs) -> Path:
        """Location of the file an obs references.

        Raises:
            ValueError: If value_complex is missing.
        """
        return self.storage.path_for(obs.parsed_value_complex().filename)

    def purge_complex_data(self, obs: Obs) -> bool:
        """Delete the file an obs references.

        Args:
            obs: Observation referencing stored data.

        Returns:
            True if the file was deleted or was never there, False if deletion failed.
        """
        obs.complex_data = None
        handler_type = self.get_handler_type()

        try:
            filename = obs.parsed_value_complex().filename
        except ValueError:
            self._metrics.obs_purged.labels(handler=handler_type, result="absent").inc()
            return True

        try:
            deleted = self.storage.delete(filename)
        except OSError:
            self._logger.exception(
                "complex_obs_purge_failed",
                obs_uuid=obs.uuid,
                file_path=str(self.storage.path_for(filename)),
            )
            self._metrics.obs_purged.labels(handler=handler_type, result="failed").inc()
            return False

        result = "deleted" if deleted else "absent"
        self._metrics.obs_purged.labels(handler=handler_type, result=result).inc()
        self._logger.info("complex_obs_purged", obs_uuid=obs.uuid, filename=filename, result=result)
        return True
