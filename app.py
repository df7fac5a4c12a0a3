#!/usr/bin/env python3
"""
Webhook server entry point.

Serves GET /<action>/<target...> against a snapshot file using the
dry-run executor. Configure with ITSYHOME_* environment variables or a
.env file.
"""
import logging
from typing import Optional

from itsyhome.actions import ActionEngine, DryRunExecutor
from itsyhome.config_loader import configure_logging, load_config_from_env
from itsyhome.exceptions import SnapshotLoadError
from itsyhome.snapshot_loader import SnapshotLoader
from itsyhome.snapshot_store import SnapshotStore
from itsyhome.webhook import create_app

config = load_config_from_env()
configure_logging(config)
logger = logging.getLogger(__name__)


def _build_engine() -> Optional[ActionEngine]:
    """Load the snapshot and wire the engine; None leaves the server unconfigured."""
    if not config.snapshot_path:
        logger.warning("ITSYHOME_SNAPSHOT_PATH not set; webhook will answer 500")
        return None

    try:
        snapshot, groups = SnapshotLoader(config.snapshot_path).load()
    except SnapshotLoadError as e:
        logger.error(f"Failed to load snapshot: {e}")
        return None

    return ActionEngine(
        SnapshotStore(snapshot, groups),
        DryRunExecutor(),
        enable_suggestions=config.enable_suggestions,
        suggestion_limit=config.suggestion_limit,
        suggestion_threshold=config.suggestion_threshold,
    )


app = create_app(_build_engine(), config)


if __name__ == "__main__":
    if config.webhook_enabled:
        app.run(host=config.webhook_host, port=config.webhook_port, debug=False)
    else:
        logger.info("Webhook disabled; set ITSYHOME_WEBHOOK_ENABLED=true to serve")
