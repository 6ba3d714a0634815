# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

# Logging
_LOG_LEVEL = os.getenv("STEPFLOW_LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("STEPFLOW_LOG_TO_FILE", "false").lower() in ("true", "1", "yes")
_LOGS_DIR = Path(os.getenv("STEPFLOW_LOGS_DIR", str(_PROJECT_ROOT / "logs")))

# Navigation
_TRANSITION_POLICY = os.getenv("STEPFLOW_TRANSITION_POLICY", "queue").lower()


@dataclass
class Config:
    """Engine configuration."""

    # Application Info
    APP_NAME: str = "Stepflow"
    VERSION: str = "1.0.0"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = _LOGS_DIR

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL  # Console level; the file handler always logs DEBUG
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_FILE: str = "stepflow.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Guarded transitions
    # queue:  overlapping executions wait for the one in flight
    # reject: overlapping executions raise TransitionInProgressError
    TRANSITION_POLICIES: Tuple[str, ...] = ("queue", "reject")
    TRANSITION_POLICY: str = _TRANSITION_POLICY

    @classmethod
    def validate_policy(cls, policy: str) -> str:
        """Normalize a transition policy name, rejecting unknown values."""
        normalized = (policy or "").lower()
        if normalized not in cls.TRANSITION_POLICIES:
            raise ValueError(
                f"Unknown transition policy '{policy}' "
                f"(expected one of: {', '.join(cls.TRANSITION_POLICIES)})"
            )
        return normalized
