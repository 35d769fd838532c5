"""Parse workload manifests and decide which apps/v1 collection they belong to."""

import json
from typing import Any, Dict

import yaml

from .errors import InvalidManifest, UnsupportedKind

COLLECTIONS = {"Deployment": "deployments", "StatefulSet": "statefulsets"}


class _ManifestLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings so the tree stays JSON-serialisable."""


_ManifestLoader.yaml_implicit_resolvers = {
    ch: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for ch, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class Manifest:
    def __init__(self, document: Dict[str, Any]):
        self.document = document

    @property
    def kind(self) -> str:
        kind = self.document.get("kind")
        if kind is None:
            return ""
        if isinstance(kind, bool):
            return "true" if kind else "false"
        return str(kind)

    @property
    def name(self) -> str:
        meta = self.document.get("metadata")
        if isinstance(meta, dict) and isinstance(meta.get("name"), str):
            return meta["name"]
        return ""

    def to_json(self) -> str:
        try:
            return json.dumps(self.document, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise InvalidManifest(f"manifest cannot be sent as JSON: {e}") from e


def parse_manifest(data) -> Manifest:
    try:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        doc = yaml.load(data, Loader=_ManifestLoader)
    except UnicodeDecodeError as e:
        raise InvalidManifest(f"manifest is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidManifest(f"manifest is not valid YAML/JSON: {e}") from e
    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise InvalidManifest(f"manifest must be a mapping, got {type(doc).__name__}")
    return Manifest(doc)


def classify(manifest: Manifest) -> str:
    kind = manifest.kind
    if kind not in COLLECTIONS:
        raise UnsupportedKind(kind)
    return kind
