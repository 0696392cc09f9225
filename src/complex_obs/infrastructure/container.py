"""Dependency injection container for Complex Obs."""

from dataclasses import dataclass

import structlog
from opentelemetry import trace

from complex_obs.adapters.outbound.file_storage import FileComplexDataStorage
from complex_obs.domain.services.text_handler import TextHandler
from complex_obs.infrastructure.config import Config, get_config
from complex_obs.infrastructure.logging import setup_logging
from complex_obs.infrastructure.metrics import ComplexObsMetrics, get_metrics
from complex_obs.infrastructure.tracing import setup_tracing
from complex_obs.ports.outbound import ComplexDataStoragePort


@dataclass
class Container:
    """Dependency injection container for complex obs components."""

    config: Config
    logger: structlog.stdlib.BoundLogger
    tracer: trace.Tracer
    metrics: ComplexObsMetrics
    storage: ComplexDataStoragePort
    text_handler: TextHandler

    _instance: "Container | None" = None

    @classmethod
    def create(cls, config: Config | None = None) -> "Container":
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        logger = setup_logging(
            level=config.observability.log_level,
            log_format=config.observability.log_format,
        )
        tracer = setup_tracing(config)
        metrics = get_metrics()
        metrics.system_info.info(
            {
                "version": "0.1.0",
                "environment": config.observability.environment,
            }
        )

        storage = FileComplexDataStorage(
            config.storage.resolve_complex_obs_dir(),
            encoding=config.storage.encoding,
        )
        text_handler = TextHandler(
            storage,
            default_extension=config.storage.default_extension,
            metrics=metrics,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            storage=storage,
            text_handler=text_handler,
        )

        logger.info(
            "complex_obs_container_initialized",
            environment=config.observability.environment,
            complex_obs_dir=str(storage.location),
            handler_type=text_handler.get_handler_type(),
        )

        return cls._instance

    @classmethod
    def get(cls) -> "Container":
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
