"""Prometheus metrics for Complex Obs."""

from prometheus_client import Counter, Histogram, Info, CollectorRegistry, REGISTRY


class ComplexObsMetrics:
    """Metrics collector for complex observation handlers."""

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        # Handler Operations
        self.obs_saved = Counter(
            "complex_obs_saved_total",
            "Total complex obs payloads written",
            ["handler"],
            registry=registry,
        )
        self.obs_loaded = Counter(
            "complex_obs_loaded_total",
            "Total complex obs payloads read",
            ["handler", "view"],
            registry=registry,
        )
        self.obs_purged = Counter(
            "complex_obs_purged_total",
            "Total complex obs payloads purged",
            ["handler", "result"],
            registry=registry,
        )
        self.bytes_written = Counter(
            "complex_obs_bytes_written_total",
            "Total characters written to complex obs files",
            ["handler"],
            registry=registry,
        )
        self.bytes_read = Counter(
            "complex_obs_bytes_read_total",
            "Total characters read from complex obs files",
            ["handler"],
            registry=registry,
        )

        # Error Metrics
        self.read_failures = Counter(
            "complex_obs_read_failures_total",
            "Total complex obs reads that returned no data",
            ["handler"],
            registry=registry,
        )
        self.save_failures = Counter(
            "complex_obs_save_failures_total",
            "Total complex obs saves that failed",
            ["handler", "error_type"],
            registry=registry,
        )
        self.missing_complex_data = Counter(
            "complex_obs_missing_complex_data_total",
            "Total saves skipped because the obs carried no complex data",
            ["handler"],
            registry=registry,
        )

        # Latency
        self.save_latency = Histogram(
            "complex_obs_save_latency_seconds",
            "Complex obs save latency",
            ["handler"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=registry,
        )
        self.load_latency = Histogram(
            "complex_obs_load_latency_seconds",
            "Complex obs load latency",
            ["handler"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=registry,
        )

        # System Info
        self.system_info = Info(
            "complex_obs",
            "Complex obs handler information",
            registry=registry,
        )


_metrics: ComplexObsMetrics | None = None


def get_metrics() -> ComplexObsMetrics:
    """Get the singleton metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = ComplexObsMetrics()
    return _metrics
