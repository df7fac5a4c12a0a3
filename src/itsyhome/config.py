from dataclasses import dataclass
from typing import Optional


@dataclass
class ItsyhomeConfig:
    # Snapshot
    snapshot_path: Optional[str] = None

    # Webhook
    webhook_enabled: bool = False
    webhook_host: str = "0.0.0.0"
    webhook_port: int = 8423

    # Licensing
    pro_enabled: bool = False

    # Not-found suggestions
    enable_suggestions: bool = True
    suggestion_threshold: float = 0.6
    suggestion_limit: int = 3

    # Logging
    log_level: str = "INFO"
