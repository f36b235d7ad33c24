from pathlib import Path
from typing import Protocol


class DocumentWatcherPort(Protocol):
    """Source of changed component documents to rescan."""

    @property
    def directory(self) -> Path: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
