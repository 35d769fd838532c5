import logging, os, sys
from prometheus_client import CollectorRegistry, Counter, push_to_gateway

LOG = logging.getLogger("workloadctl")
logging.basicConfig(stream=sys.stderr, level=os.getenv("LOG_LEVEL", "WARNING"),
                    format="%(asctime)s %(levelname)s %(message)s")

REGISTRY = CollectorRegistry()
REQUESTS = Counter('workloadctl_requests_total', 'api requests sent',
                   ['method', 'collection', 'code'], registry=REGISTRY)
OUTCOMES = Counter('workloadctl_outcomes_total', 'invocation outcomes',
                   ['mode', 'result'], registry=REGISTRY)


def push_metrics(gateway: str | None):
    if not gateway:
        return
    try:
        push_to_gateway(gateway, job="workloadctl", registry=REGISTRY)
    except (OSError, ValueError) as e:
        LOG.warning("metrics push to %s failed: %s", gateway, e)


def truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")
