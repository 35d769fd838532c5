"""Fetch manifests and config files from an http(s) URL or the local filesystem."""

import pathlib
from urllib.parse import urlparse

import requests

from .errors import ResourceUnreachable
from .utils import LOG


def load_resource(location: str, timeout=(5.0, 30.0)) -> bytes:
    """Return the bytes at ``location``.

    Remote locations are tried first; any failure there (network error,
    non-2xx status) falls back to reading ``location`` as a local path.
    """
    if _is_remote(location):
        try:
            r = requests.get(location, timeout=timeout)
            r.raise_for_status()
            return r.content
        except requests.RequestException as e:
            LOG.info("remote fetch of %s failed (%s), trying local path", location, e)

    path = pathlib.Path(location).expanduser()
    if not path.is_file():
        raise ResourceUnreachable(location)
    return path.read_bytes()


def _is_remote(location: str) -> bool:
    try:
        parsed = urlparse(location)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
