"""Active project discovery."""

import logging
import subprocess
from typing import Optional

from pubsend.errors import ProjectDiscoveryError

logger = logging.getLogger(__name__)

GCLOUD_PROJECT_COMMAND = ["gcloud", "config", "list", "--format", "value(core.project)"]


def discover_project(explicit: Optional[str] = None) -> str:
    """
    Return the project to work in.

    An explicit project wins. Otherwise the gcloud CLI configuration is asked.

    Raises:
        ProjectDiscoveryError: gcloud is missing, fails, or has no project set
    """
    if explicit:
        return explicit

    try:
        result = subprocess.run(
            GCLOUD_PROJECT_COMMAND,
            capture_output=True,
            check=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise ProjectDiscoveryError("gcloud not found; pass -project") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise ProjectDiscoveryError(f"gcloud config list: {detail}") from exc

    project = result.stdout.strip()
    if not project:
        raise ProjectDiscoveryError("no project configured in gcloud; pass -project")
    return project
