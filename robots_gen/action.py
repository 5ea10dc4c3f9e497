# File: robots_gen/action.py
"""robots_gen.action: GitHub Action entry point.

Inputs arrive as ``INPUT_<NAME>`` environment variables, the written path is
published as the ``robots_path`` output through the ``GITHUB_OUTPUT`` file.

Run with ``python -m robots_gen.action``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional

from robots_gen import __version__
from robots_gen.artifacts import DirectoryArtifactUploader
from robots_gen.config import ConfigurationError, config_from_inputs
from robots_gen.engine import RobotsGenerator, StrictValidationError
from robots_gen.logger import configure, logger

__all__ = ["read_inputs", "set_output", "artifact_store", "main"]

_PREFIX = "INPUT_"


def read_inputs(environ: Mapping[str, str]) -> Dict[str, str]:
    """Collect action inputs; ``INPUT_SITE_URL`` becomes ``site_url``."""
    return {
        key[len(_PREFIX):].lower().replace(" ", "_"): value
        for key, value in environ.items()
        if key.startswith(_PREFIX)
    }


def set_output(name: str, value: str, environ: Mapping[str, str]) -> None:
    output_file = environ.get("GITHUB_OUTPUT")
    if not output_file:
        logger.info("Output %s=%s", name, value)
        return
    with open(output_file, "a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def artifact_store(environ: Mapping[str, str]) -> Optional[DirectoryArtifactUploader]:
    """Staging directory for artifacts, only inside a GitHub Actions run."""
    if environ.get("GITHUB_ACTIONS") != "true":
        return None
    base = environ.get("RUNNER_TEMP") or "."
    return DirectoryArtifactUploader(Path(base) / "robots-gen-artifacts")


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    configure(level="DEBUG" if env.get("RUNNER_DEBUG") == "1" else "INFO", github_actions=True)
    logger.info("RobotsGen %s", __version__)

    try:
        config = config_from_inputs(read_inputs(env), env)
        result = RobotsGenerator(config, uploader=artifact_store(env)).run()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    except StrictValidationError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Failed to write robots.txt: %s", exc)
        return 1

    set_output("robots_path", str(result.path), env)
    if result.upload is not None:
        set_output("artifact_dir", result.upload.location, env)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
