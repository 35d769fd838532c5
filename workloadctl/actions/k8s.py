"""REST calls against the apps/v1 workload collections."""

import json
from urllib.parse import quote

from ..errors import APIError, ResourceNotFound
from ..manifest import COLLECTIONS, Manifest
from ..models import Outcome, ResourceRef, Settings
from ..utils import LOG, REQUESTS
from . import http

# probe order for delete/scale; deployments always first
PROBE_ORDER = (("Deployment", "deployments"), ("StatefulSet", "statefulsets"))

JSON = "application/json"
STRATEGIC_MERGE_PATCH = "application/strategic-merge-patch+json"


def collection_url(settings: Settings, collection: str, name: str | None = None) -> str:
    url = f"{settings.api.rstrip('/')}/apis/apps/v1/namespaces/{quote(settings.namespace, safe='')}/{collection}"
    if name is not None:
        url += "/" + quote(name, safe="")
    return url


def _call(session, settings: Settings, method: str, collection: str, name=None, body=None, content_type=None):
    params = {"dryRun": "All"} if settings.dry_run else None
    code, text = http.send(session, method, collection_url(settings, collection, name),
                           settings.timeout, body=body, content_type=content_type, params=params)
    REQUESTS.labels(method, collection, str(code)).inc()
    return code, text


def _succeeded(settings: Settings, action: str, kind: str, code: int, message: str) -> Outcome:
    if settings.dry_run:
        message += " (dry run)"
    return Outcome(ok=True, action=action, kind=kind, status_code=code, message=message)


def create(session, settings: Settings, manifest: Manifest, kind: str) -> Outcome:
    LOG.info("creating %s %s in %s", kind, manifest.name or "<unnamed>", settings.namespace)
    code, text = _call(session, settings, "POST", COLLECTIONS[kind], body=manifest.to_json(), content_type=JSON)
    if not 200 <= code < 300:
        raise APIError("Create", code, text)
    return _succeeded(settings, "create", kind, code, f"Created {kind}")


def delete(session, settings: Settings, ref: ResourceRef) -> Outcome:
    return _probe(session, settings, ref, "DELETE", "Delete")


def scale(session, settings: Settings, ref: ResourceRef, replicas: int) -> Outcome:
    body = json.dumps({"spec": {"replicas": replicas}}, separators=(",", ":"))
    return _probe(session, settings, ref, "PATCH", "Scale", body=body, content_type=STRATEGIC_MERGE_PATCH)


def _probe(session, settings, ref, method, action, body=None, content_type=None) -> Outcome:
    for kind, collection in PROBE_ORDER:
        code, text = _call(session, settings, method, collection, ref.name, body, content_type)
        if code == 404:
            LOG.debug("%s not found in %s", ref.name, collection)
            continue
        if not 200 <= code < 300:
            raise APIError(action, code, text)
        return _succeeded(settings, action.lower(), kind, code, f"{action} succeeded on {kind} {ref.name}")
    raise ResourceNotFound(ref.name, ref.namespace, tuple(k for k, _ in PROBE_ORDER))
