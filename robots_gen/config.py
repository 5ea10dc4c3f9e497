# === FILE: robots_gen/config.py ===
"""
Loading and validation of RobotsGen configuration.
Pydantic describes the schema; values arrive from YAML/JSON files, CLI
options or the flat ``INPUT_*`` bag of a GitHub Action.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from robots_gen.logger import logger
from robots_gen.utils import find_public_dir, infer_site_url, split_list, to_bool

__all__ = [
    "ConfigurationError",
    "GenerationConfig",
    "HumansConfig",
    "load_config",
    "read_config_data",
    "build_config",
    "config_from_inputs",
    "default_max_size_kb",
]

_SITE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_MAX_SIZE_ENV = "ROBOTS_GEN_MAX_SIZE_KB"


class ConfigurationError(ValueError):
    """Missing or malformed input; nothing gets written."""


def default_max_size_kb() -> int:
    raw = os.environ.get(_MAX_SIZE_ENV, "").strip()
    try:
        return int(raw) if raw else 500
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", _MAX_SIZE_ENV, raw)
        return 500


class GenerationConfig(BaseModel):
    """Inputs of a single robots.txt generation run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    site_url: str = Field(..., description="Absolute site URL (http:// or https://).")
    public_dir: Path = Field(Path("dist"), description="Built site directory.")
    output_dir: Optional[Path] = Field(None, description="Where to write; defaults to public_dir.")
    filename: str = Field("robots.txt", min_length=1, description="Output file name.")
    user_agent: str = Field("*", min_length=1, description="User-agent of the generated group.")
    disallow: Tuple[str, ...] = Field(default_factory=tuple, description="Disallow patterns.")
    allow: Tuple[str, ...] = Field(default_factory=tuple, description="Allow patterns.")
    crawl_delay: Optional[str] = Field(None, description="Crawl-delay value, emitted verbatim.")
    sitemaps: Tuple[str, ...] = Field(default_factory=tuple, description="Sitemap URLs or paths.")
    comments: bool = Field(True, description="Prepend the generator banner.")
    strict: bool = Field(True, description="Validation errors abort the run.")
    debug: bool = Field(False, description="Print the generated file.")
    upload: bool = Field(False, description="Stage the file as a CI artifact.")
    allow_autodetect: bool = Field(True, description="Autodetect public_dir and site_url.")
    artifact_name: str = Field("robots-file", min_length=1, description="Artifact name.")
    artifact_retention_days: Optional[int] = Field(
        None, ge=1, le=90, description="Artifact retention period (days)."
    )
    max_size_kb: int = Field(default_factory=default_max_size_kb, gt=0, description="Size limit.")

    @field_validator("site_url", mode="before")
    def _check_site_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not _SITE_URL_RE.match(v):
                raise ValueError("site_url must start with http:// or https://")
        return v

    @field_validator("disallow", "allow", "sitemaps", mode="before")
    def _split_lists(cls, v: Any) -> Any:
        if v is None or isinstance(v, (str, list, tuple)):
            return tuple(split_list(v))
        return v

    @field_validator("crawl_delay", mode="before")
    def _blank_delay(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("filename")
    def _plain_filename(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("filename must not contain path separators")
        return v

    @property
    def robots_dir(self) -> Path:
        return self.output_dir if self.output_dir is not None else self.public_dir

    @property
    def robots_path(self) -> Path:
        return self.robots_dir / self.filename


class HumansConfig(BaseModel):
    """Content of a humans.txt file (humanstxt.org layout)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    team_name: Optional[str] = None
    team_title: Optional[str] = None
    team_contact: Optional[str] = None
    team_location: Optional[str] = None
    thanks_name: Optional[str] = None
    thanks_url: Optional[str] = None
    site_last_update: Optional[str] = None
    site_standards: Optional[str] = None
    site_components: Optional[str] = None
    site_software: Optional[str] = None
    site_language: Optional[str] = None
    site_doctype: Optional[str] = None
    site_ide: Optional[str] = None
    include_comments: bool = False

    @model_validator(mode="before")
    @classmethod
    def _drop_blanks(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: (v.strip() or None) if isinstance(v, str) else v for k, v in data.items()
            }
        return data

    def section(self, prefix: str) -> Dict[str, str]:
        """Non-empty fields of one section, keyed without the prefix."""
        start = f"{prefix}_"
        return {
            name[len(start):]: value
            for name, value in self.model_dump().items()
            if name.startswith(start) and value
        }


_DEFAULT_CFG = Path("robots-gen.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_data(path: Union[str, Path, None]) -> dict[str, Any]:
    """
    Read a YAML or JSON config file into a plain mapping.
    Without *path* the ``robots-gen.yaml`` in the working directory is used.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None]) -> GenerationConfig:
    """Read YAML or JSON and return a validated GenerationConfig."""
    return GenerationConfig(**read_config_data(path))


def _autodetect(data: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    resolved = dict(data)
    requested = resolved.get("public_dir") or "dist"
    detected = find_public_dir(requested)
    if detected is not None and Path(detected) != Path(requested):
        logger.info("Auto-detected public_dir: %s", detected)
        resolved["public_dir"] = detected
    if not resolved.get("site_url"):
        inferred = infer_site_url(resolved.get("public_dir") or "dist", environ)
        if inferred:
            logger.info("Auto-inferred site_url: %s", inferred)
            resolved["site_url"] = inferred
    return resolved


def build_config(
    data: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None
) -> GenerationConfig:
    """
    Validate a raw mapping into a GenerationConfig, applying autodetection first.
    Every failure is reported as ConfigurationError.
    """
    env = os.environ if environ is None else environ
    values = {k: v for k, v in data.items() if v is not None}
    if to_bool(values.get("allow_autodetect"), True):
        values = _autodetect(values, env)
    if not values.get("site_url"):
        raise ConfigurationError("site_url is required or could not be auto-detected")
    try:
        return GenerationConfig(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(problems) from exc


# GitHub Action input name -> GenerationConfig field
_INPUT_FIELDS: Dict[str, str] = {
    "site_url": "site_url",
    "public_dir": "public_dir",
    "robots_output_dir": "output_dir",
    "robots_filename": "filename",
    "robots_user_agent": "user_agent",
    "robots_disallow": "disallow",
    "robots_allow": "allow",
    "robots_crawl_delay": "crawl_delay",
    "sitemap_urls": "sitemaps",
    "artifact_name": "artifact_name",
}
_INPUT_FLAGS: Dict[str, Tuple[str, bool]] = {
    "robots_comments": ("comments", True),
    "strict_validation": ("strict", True),
    "debug_show_robots": ("debug", False),
    "upload_artifacts": ("upload", False),
    "allow_autodetect": ("allow_autodetect", True),
}


def config_from_inputs(
    inputs: Mapping[str, str], environ: Optional[Mapping[str, str]] = None
) -> GenerationConfig:
    """Build a config from a flat string bag; empty strings mean "use the default"."""
    data: dict[str, Any] = {}
    for name, field_name in _INPUT_FIELDS.items():
        value = (inputs.get(name) or "").strip()
        if value:
            data[field_name] = value
    for name, (field_name, fallback) in _INPUT_FLAGS.items():
        data[field_name] = to_bool(inputs.get(name), fallback)

    retention = (inputs.get("artifact_retention_days") or "").strip()
    if retention:
        try:
            days = int(retention)
        except ValueError as exc:
            raise ConfigurationError(
                f"artifact_retention_days must be an integer, got {retention!r}"
            ) from exc
        if days:
            data["artifact_retention_days"] = days
    return build_config(data, environ)
