import logging
import os
from pathlib import Path


# ---------------------------------------------------------
# Logging goes to project-root/logs/viewer.log
# ---------------------------------------------------------
def ensure_logging():
    override = os.getenv("SYNTAX_VIEWER_LOG_DIR")
    if override:
        logs_dir = Path(override)
    else:
        project_root = Path(__file__).resolve().parents[2]
        logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "viewer.log"

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            filename=str(log_file),
            level=logging.INFO,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )
