# File: robots_gen/artifacts.py
"""robots_gen.artifacts: optional artifact upload of generated files.

The generator only knows the :class:`ArtifactUploader` protocol. The bundled
:class:`DirectoryArtifactUploader` stages files in a directory together with a
``manifest.json``; in the GitHub Action the staged directory is handed to
``actions/upload-artifact``.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from robots_gen.logger import logger

__all__ = ["ArtifactUpload", "ArtifactUploader", "DirectoryArtifactUploader"]


@dataclass(slots=True)
class ArtifactUpload:
    """Result of a finished upload."""

    name: str
    location: str
    files: List[str] = field(default_factory=list)
    retention_days: Optional[int] = None
    expires_at: Optional[str] = None


class ArtifactUploader(Protocol):
    async def upload(
        self,
        name: str,
        files: Sequence[Path],
        root_dir: Path,
        retention_days: Optional[int] = None,
    ) -> ArtifactUpload: ...


class DirectoryArtifactUploader:
    """Copy artifact files below ``<store_dir>/<name>/`` and record a manifest."""

    MANIFEST = "manifest.json"

    def __init__(self, store_dir: Union[str, Path]) -> None:
        self.store_dir = Path(store_dir)

    async def upload(
        self,
        name: str,
        files: Sequence[Path],
        root_dir: Path,
        retention_days: Optional[int] = None,
    ) -> ArtifactUpload:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"Invalid artifact name: {name!r}")
        target = self.store_dir / name
        return await asyncio.to_thread(self._copy, target, name, files, root_dir, retention_days)

    def _copy(
        self,
        target: Path,
        name: str,
        files: Sequence[Path],
        root_dir: Path,
        retention_days: Optional[int],
    ) -> ArtifactUpload:
        target.mkdir(parents=True, exist_ok=True)
        copied: List[str] = []
        for file in files:
            source = Path(file)
            # keep the layout relative to root_dir, flatten anything outside it
            try:
                relative = source.resolve().relative_to(Path(root_dir).resolve())
            except ValueError:
                relative = Path(source.name)
            destination = target / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
            copied.append(relative.as_posix())
            logger.debug("Staged artifact file %s -> %s", source, destination)

        expires_at = None
        if retention_days:
            expires_at = (datetime.now(timezone.utc) + timedelta(days=retention_days)).isoformat()
        result = ArtifactUpload(
            name=name,
            location=str(target),
            files=copied,
            retention_days=retention_days,
            expires_at=expires_at,
        )
        (target / self.MANIFEST).write_text(
            json.dumps(asdict(result), ensure_ascii=False, indent=2), encoding="utf-8"
        )
        return result
