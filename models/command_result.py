from pydantic import BaseModel
from typing import Any, Optional


class CommandResult(BaseModel):
    command: str
    ok: bool = True
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, command: str, value: Any = None) -> "CommandResult":
        return cls(command=command, ok=True, value=value)

    @classmethod
    def failure(cls, command: str, error: str) -> "CommandResult":
        return cls(command=command, ok=False, error=error)
