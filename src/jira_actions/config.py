"""Configuration for action execution.

ActionsConfig carries the knobs shared by every action in a journey: where
diagnostics are written, when the background screenshot is taken, and how
logging is set up.
"""

import os
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ActionsConfig(BaseModel):
    """Settings shared by actions and their diagnostic captures.

    Attributes:
        diagnostics_root: Relative root under which diagnostic directories are created
        screenshot_delay_ms: Delay from the action start before the screenshot is taken
        screenshot_filename: Fixed filename of the screenshot inside its directory
        log_level: Logging level passed to setup_logging
        json_logs: Whether logs are rendered as JSON
    """

    model_config = ConfigDict(frozen=True)

    diagnostics_root: Path = Field(
        default=Path("diagnostics"),
        description="Root directory for per-execution diagnostics",
    )
    screenshot_delay_ms: int = Field(
        default=800,
        ge=0,
        description="Delay from action start before the screenshot is taken",
    )
    screenshot_filename: str = Field(
        default="screenshot.png",
        min_length=1,
        description="Filename of the screenshot inside its diagnostic directory",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    @property
    def screenshot_delay(self) -> timedelta:
        """Screenshot delay as a timedelta."""
        return timedelta(milliseconds=self.screenshot_delay_ms)

    @classmethod
    def from_env(cls) -> "ActionsConfig":
        """Load configuration from environment variables.

        Environment variables follow the pattern: JIRA_ACTIONS_<SETTING_NAME>
        For example: JIRA_ACTIONS_SCREENSHOT_DELAY_MS, JIRA_ACTIONS_LOG_LEVEL

        Returns:
            ActionsConfig instance with environment overrides
        """
        return cls(
            diagnostics_root=Path(
                os.getenv(
                    "JIRA_ACTIONS_DIAGNOSTICS_ROOT",
                    str(cls.model_fields["diagnostics_root"].default),
                )
            ),
            screenshot_delay_ms=int(
                os.getenv(
                    "JIRA_ACTIONS_SCREENSHOT_DELAY_MS",
                    cls.model_fields["screenshot_delay_ms"].default,
                )
            ),
            screenshot_filename=os.getenv(
                "JIRA_ACTIONS_SCREENSHOT_FILENAME",
                cls.model_fields["screenshot_filename"].default,
            ),
            log_level=os.getenv("JIRA_ACTIONS_LOG_LEVEL", cls.model_fields["log_level"].default),
            json_logs=os.getenv(
                "JIRA_ACTIONS_JSON_LOGS",
                str(cls.model_fields["json_logs"].default),
            ).lower()
            in ("true", "1", "yes"),
        )
