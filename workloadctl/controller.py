import sys

from .actions import http, k8s as k8s_act
from .config import ConfigResolver
from .errors import DispatchError, InvalidConfiguration, InvalidReplicaCount, UnsupportedKind, WorkloadError
from .loader import load_resource
from .manifest import classify, parse_manifest
from .models import MODES, Outcome, ResourceRef, Settings
from .utils import LOG, OUTCOMES, push_metrics, truthy

USAGE = "Invalid MODE. Use MODE=create|delete|scale"


def main() -> int:
    resolver = None
    try:
        resolver = ConfigResolver.from_environment()
        outcome = run(resolver)
    except WorkloadError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    finally:
        if resolver is not None:
            push_metrics(resolver.get("PUSHGATEWAY_URL"))

    print(outcome.message if outcome else USAGE)
    return outcome.exit_code if outcome else 0


def run(resolver: ConfigResolver, session=None) -> Outcome | None:
    """Resolve settings for the selected mode and perform it.

    Returns ``None`` for an unrecognised MODE. Configuration, loader and
    manifest errors propagate; API failures and rejected manifest kinds
    come back as a failed Outcome.
    """
    mode = resolver.require("MODE").strip().lower()
    if mode not in MODES:
        LOG.warning("unrecognised MODE %r", mode)
        return None

    settings = load_settings(resolver)
    if mode == "create":
        uri = resolver.require("RESOURCE_URI")
        manifest = parse_manifest(load_resource(uri, settings.timeout))
        try:
            kind = classify(manifest)
        except UnsupportedKind as e:
            return _record(mode, Outcome.failure(mode, e))
    else:
        ref = ResourceRef(namespace=settings.namespace, name=resolver.require("RESOURCE_NAME"))
        if mode == "scale":
            replicas = parse_replicas(resolver.require("SCALE_COUNT"))

    own_session = session is None
    if own_session:
        session = http.session_for(settings)
    try:
        if mode == "create":
            outcome = k8s_act.create(session, settings, manifest, kind)
        elif mode == "delete":
            outcome = k8s_act.delete(session, settings, ref)
        else:
            outcome = k8s_act.scale(session, settings, ref, replicas)
    except DispatchError as e:
        outcome = Outcome.failure(mode, e)
    finally:
        if own_session:
            session.close()
    return _record(mode, outcome)


def _record(mode: str, outcome: Outcome) -> Outcome:
    OUTCOMES.labels(mode, outcome.result).inc()
    return outcome


def load_settings(resolver: ConfigResolver) -> Settings:
    verify = True
    if truthy(resolver.get("INSECURE_SKIP_TLS_VERIFY")):
        verify = False
    elif resolver.get("CA_CERT"):
        verify = resolver.get("CA_CERT")
    return Settings(
        api=resolver.require("K8S_API"),
        namespace=resolver.require("NAMESPACE"),
        token=resolver.require("BEARER_TOKEN"),
        verify=verify,
        timeout=(_seconds(resolver, "CONNECT_TIMEOUT", 5.0), _seconds(resolver, "READ_TIMEOUT", 30.0)),
        dry_run=truthy(resolver.get("DRY_RUN")),
    )


def parse_replicas(value: str) -> int:
    try:
        n = int(value.strip())
    except ValueError:
        raise InvalidReplicaCount(value) from None
    if n < 0:
        raise InvalidReplicaCount(value)
    return n


def _seconds(resolver: ConfigResolver, key: str, default: float) -> float:
    raw = resolver.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{key} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise InvalidConfiguration(f"{key} must be positive, got {raw!r}")
    return value


if __name__ == "__main__":
    sys.exit(main())
