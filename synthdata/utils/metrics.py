# utils/metrics.py
import psutil
from loguru import logger
from prometheus_client import Counter, Histogram, Gauge, REGISTRY

# attribute -> (metric name, help text)
WORKFLOW_COUNTERS = {
    "PROJECTS_CREATED": ("synthdata_projects_created", "Projects created"),
    "DATASETS_CREATED": ("synthdata_datasets_created", "Datasets created from uploads or templates"),
    "GENERATIONS_CREATED": ("synthdata_generations_created", "Generation records written"),
    "GENERATION_FAILURES": ("synthdata_generation_failures", "Generation submissions rolled back"),
}


def _registered(name: str):
    for collector, names in REGISTRY._collector_to_names.items():
        if name in names or f"{name}_total" in names:
            return collector
    return None


class MetricsManager:
    """
    Prometheus collectors for request timing, host load and the
    project/dataset/generation workflow.
    """
    def __init__(self):
        self.REQUEST_COUNT = self._metric(Counter, "synthdata_request_count", "Requests handled")
        self.PROCESS_TIME = self._metric(Histogram, "synthdata_process_time_seconds", "Request processing time")
        self.CPU_USAGE = self._metric(Gauge, "synthdata_cpu_usage_percent", "Host CPU usage percentage")
        self.MEMORY_USAGE = self._metric(Gauge, "synthdata_memory_usage_bytes", "Host memory in use")
        for attribute, (name, description) in WORKFLOW_COUNTERS.items():
            setattr(self, attribute, self._metric(Counter, name, description))

    @staticmethod
    def _metric(metric_type, name, description):
        # The default registry rejects a second collector with the same name
        return _registered(name) or metric_type(name, description)

    def observe_request(self, latency: float) -> None:
        self.REQUEST_COUNT.inc()
        self.PROCESS_TIME.observe(latency)
        try:
            self.CPU_USAGE.set(psutil.cpu_percent())
            self.MEMORY_USAGE.set(psutil.virtual_memory().used)
        except Exception as e:
            logger.warning(f"Could not sample host usage: {e}")

    @staticmethod
    def get_system_metrics() -> dict:
        memory = psutil.virtual_memory()
        return {
            "cpu_usage_percent": psutil.cpu_percent(),
            "memory_usage_mb": round(memory.used / (1024 * 1024), 1),
            "memory_percent": memory.percent,
        }


metrics_manager = MetricsManager()
