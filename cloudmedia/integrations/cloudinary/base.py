from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SignedRequestParams:
    api_key: str
    timestamp: int
    signature: str

    def as_query(self) -> list[tuple[str, str]]:
        return [
            ("api_key", self.api_key),
            ("timestamp", str(self.timestamp)),
            ("signature", self.signature),
        ]


class FileSource(Protocol):
    """Forward-only async byte source; ``read`` returns ``b""`` once exhausted.

    Starlette's ``UploadFile`` already matches this shape.
    """

    async def read(self, size: int = -1) -> bytes: ...
