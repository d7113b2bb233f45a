"""Transport contract consumed by the dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from contracts.tool_sdk import FlatParams


class Transport(ABC):
    """Executes one registrar command and returns the raw JSON envelope.

    Implementations drop ``None`` values before transmission, own any
    retry policy, and raise ``contracts.errors.ApiError`` once the remote
    side has reported a failure.
    """

    @abstractmethod
    async def execute(self, command: str, params: FlatParams | None = None) -> dict[str, Any]:
        ...
