from __future__ import annotations

from pathlib import Path

from dayline import config


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains dayline/, config/ and tests/.
    """
    return Path(__file__).parent.parent.resolve()


def config_dir() -> Path:
    return project_root() / "config"


def blocks_config_path() -> Path:
    """
    Block table YAML path.

    Resolution order:
    1. DAYLINE_BLOCKS_CONFIG env var (explicit override)
    2. <project root>/config/time_blocks.yaml (default)
    """
    if config.BLOCKS_CONFIG:
        return Path(config.BLOCKS_CONFIG).expanduser().resolve()
    return config_dir() / "time_blocks.yaml"
