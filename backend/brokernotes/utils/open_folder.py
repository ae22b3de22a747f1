from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def open_folder(folder: Path) -> bool:
    """
    Open `folder` in the platform file browser. Best effort: any failure is
    logged and reported as False.
    """
    folder = Path(folder)
    if not folder.is_dir():
        return False

    try:
        if sys.platform.startswith("win"):
            os.startfile(str(folder))  # type: ignore[attr-defined]
            return True

        opener = "open" if sys.platform == "darwin" else "xdg-open"
        exe = shutil.which(opener)
        if not exe:
            logger.warning("Unable to open output folder automatically (%s not found)", opener)
            return False
        subprocess.Popen([exe, str(folder)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return True
    except OSError as e:
        logger.warning("Unable to open output folder automatically: %s", e)
        return False
