# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONVERT_BIN = "convert"
TRIM_FUZZ = "1%"


def convert_image(source: Path, target: Path, convert_bin: str = DEFAULT_CONVERT_BIN) -> bool:
    """Trim the transparent border of source into target. False on failure."""
    cmd = [convert_bin, "-trim", "-fuzz", TRIM_FUZZ, str(source), str(target)]
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.error(f"Failed to convert {source}: {e}")
        return False
    if proc.returncode != 0:
        logger.error(f"Failed to convert {source}, exited with {proc.returncode}")
        return False
    return True


def copy_image(source: Path, target: Path) -> None:
    shutil.copyfile(source, target)
