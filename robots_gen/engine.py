# File: robots_gen/engine.py
"""robots_gen.engine: orchestration of build, validation, writing and upload."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from robots_gen.artifacts import ArtifactUpload, ArtifactUploader
from robots_gen.builder import GeneratedDocument, build_humans_txt, build_robots_txt
from robots_gen.config import ConfigurationError, GenerationConfig, HumansConfig
from robots_gen.logger import logger
from robots_gen.utils import format_file_size
from robots_gen.validation import (
    Finding,
    has_errors,
    log_findings,
    validate_humans_txt,
    validate_robots_txt,
)

__all__ = [
    "GenerationResult",
    "RobotsGenerator",
    "StrictValidationError",
    "generate_humans",
    "write_document",
]


class StrictValidationError(RuntimeError):
    """Strict validation found errors; nothing was written."""

    def __init__(self, message: str, findings: List[Finding]) -> None:
        super().__init__(message)
        self.findings = findings


@dataclass(slots=True)
class GenerationResult:
    path: Path
    document: GeneratedDocument
    findings: List[Finding] = field(default_factory=list)
    upload: Optional[ArtifactUpload] = None


def write_document(
    document: GeneratedDocument,
    path: Path,
    findings: List[Finding],
    *,
    strict: bool,
    kind: str,
) -> Path:
    """Write *document* unless strict validation produced errors."""
    if strict and has_errors(findings):
        raise StrictValidationError(f"{kind} validation failed (see errors above)", findings)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.text, encoding="utf-8")
    logger.info("%s written: %s", kind, path)
    logger.info("  Size: %s", format_file_size(path.stat().st_size))
    return path


class RobotsGenerator:
    """Facade for the CLI, the Action adapter and tests."""

    def __init__(
        self, config: GenerationConfig, uploader: Optional[ArtifactUploader] = None
    ) -> None:
        self.config = config
        self.uploader = uploader

    def build(self) -> GeneratedDocument:
        return build_robots_txt(self.config)

    def validate(self, document: GeneratedDocument) -> List[Finding]:
        cfg = self.config
        return validate_robots_txt(
            document.text,
            strict=cfg.strict,
            max_size_kb=cfg.max_size_kb,
            require_sitemap=False,
            public_dir=cfg.public_dir,
            site_url=cfg.site_url,
        )

    def _prepare_dirs(self) -> None:
        cfg = self.config
        if not cfg.public_dir.is_dir():
            raise ConfigurationError(f"public_dir not found: {cfg.public_dir}")
        if not cfg.robots_dir.is_dir():
            try:
                cfg.robots_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ConfigurationError(
                    f"Cannot create output directory {cfg.robots_dir}: {exc}"
                ) from exc
            logger.info("Created output directory: %s", cfg.robots_dir)

    def log_configuration(self) -> None:
        cfg = self.config
        logger.info("Configuration:")
        logger.info("  Site URL:          %s", cfg.site_url)
        logger.info("  Public Directory:  %s", cfg.public_dir)
        logger.info("  Output Directory:  %s", cfg.robots_dir)
        logger.info("  Filename:          %s", cfg.filename)
        logger.info("  User-Agent:        %s", cfg.user_agent)
        logger.info(
            "  Disallow Paths:    %s", ", ".join(cfg.disallow) or "(none - allow all)"
        )
        if cfg.allow:
            logger.info("  Allow Paths:       %s", ", ".join(cfg.allow))
        if cfg.crawl_delay:
            logger.info("  Crawl Delay:       %ss", cfg.crawl_delay)
        if cfg.sitemaps:
            logger.info("  Sitemap URLs:      %d URL(s)", len(cfg.sitemaps))
            for url in cfg.sitemaps:
                logger.info("    - %s", url)
        logger.info("  Strict Validation: %s", "Enabled" if cfg.strict else "Disabled")
        logger.info("  Upload Artifacts:  %s", "Enabled" if cfg.upload else "Disabled")

    def run(self) -> GenerationResult:
        """Build, validate and write robots.txt, then upload it if requested.

        Raises:
            ConfigurationError: the public directory is missing or the output
                directory cannot be created.
            StrictValidationError: strict mode and error findings; no file written.
        """
        self._prepare_dirs()
        self.log_configuration()

        document = self.build()
        findings = self.validate(document)
        logger.info("Validation:")
        log_findings(findings)

        path = write_document(
            document,
            self.config.robots_path,
            findings,
            strict=self.config.strict,
            kind="robots.txt",
        )

        if self.config.debug:
            logger.info("Generated robots.txt:")
            for line in document.lines:
                logger.info("  %s", line)

        result = GenerationResult(path=path, document=document, findings=findings)
        if self.config.upload:
            result.upload = self.upload(path)
        return result

    def upload(self, path: Path) -> Optional[ArtifactUpload]:
        """Best-effort upload; failures are logged and never raised."""
        if self.uploader is None:
            logger.warning("Artifact upload requested but no artifact store is available")
            return None
        cfg = self.config
        logger.info("Uploading artifact %s...", cfg.artifact_name)
        try:
            uploaded = asyncio.run(
                self.uploader.upload(
                    cfg.artifact_name, [path], cfg.robots_dir, cfg.artifact_retention_days
                )
            )
        except Exception as exc:
            logger.warning("Failed to upload artifacts: %s", exc)
            return None
        logger.info("Artifact uploaded: %s (%s)", uploaded.name, uploaded.location)
        return uploaded


def generate_humans(
    config: HumansConfig,
    output_dir: Path,
    *,
    filename: str = "humans.txt",
    strict: bool = True,
    max_size_kb: float = 500,
) -> Optional[GenerationResult]:
    """Build, validate and write humans.txt; ``None`` when there is no content."""
    document = build_humans_txt(config)
    if not document.text:
        logger.info("humans.txt skipped: no content configured")
        return None
    findings = validate_humans_txt(document.text, strict=strict, max_size_kb=max_size_kb)
    logger.info("Validation:")
    log_findings(findings)
    path = write_document(
        document, Path(output_dir) / filename, findings, strict=strict, kind="humans.txt"
    )
    return GenerationResult(path=path, document=document, findings=findings)
