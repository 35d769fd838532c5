"""Failure taxonomy. Each error knows the process exit code it maps to."""


class WorkloadError(Exception):
    exit_code = 1


class ConfigurationError(WorkloadError):
    exit_code = 2


class MissingConfiguration(ConfigurationError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required configuration {key} is missing")


class InvalidConfiguration(ConfigurationError):
    pass


class InvalidReplicaCount(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"SCALE_COUNT must be a non-negative integer, got {value!r}")


class ResourceUnreachable(WorkloadError):
    exit_code = 2

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Resource unreachable and no local file: {location}")


class InvalidManifest(WorkloadError):
    exit_code = 2


class UnsupportedKind(WorkloadError):
    exit_code = 3

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Only Deployment or StatefulSet supported. Found kind={kind}")


class DispatchError(WorkloadError):
    """Failure of an API call; reported as the invocation outcome."""
    status_code: int | None = None


class ResourceNotFound(DispatchError):
    def __init__(self, name: str, namespace: str, kinds: tuple[str, ...]):
        self.name = name
        self.namespace = namespace
        self.kinds = kinds
        self.status_code = 404
        super().__init__(f"Resource {name} not found as {' or '.join(kinds)} in namespace {namespace}")


class APIError(DispatchError):
    def __init__(self, action: str, status_code: int, body: str):
        self.action = action
        self.status_code = status_code
        self.body = body
        super().__init__(f"{action} failed: {status_code} - {body}")


class TransportError(DispatchError):
    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method} {url} failed: {cause}")
