from pydantic import BaseModel
from typing import Optional, Tuple, Union

MODES = ("create", "delete", "scale")

class Settings(BaseModel):
    api: str
    namespace: str
    token: str
    # False, True, or a CA bundle path, as accepted by requests
    verify: Union[bool, str] = True
    timeout: Tuple[float, float] = (5.0, 30.0)
    dry_run: bool = False

class ResourceRef(BaseModel):
    namespace: str
    name: str

class Outcome(BaseModel):
    ok: bool
    action: str
    kind: Optional[str] = None
    status_code: Optional[int] = None
    message: str
    error: Optional[str] = None
    exit_code: int = 0

    @classmethod
    def failure(cls, action: str, exc) -> "Outcome":
        return cls(ok=False, action=action, status_code=getattr(exc, "status_code", None),
                   message=str(exc), error=type(exc).__name__, exit_code=exc.exit_code)

    @property
    def result(self) -> str:
        return "success" if self.ok else (self.error or "failure")
