"""
Startup checks module for validating configuration before connecting.

This module validates:
- The Discord bot token (TOKEN)
- The optional config.yaml overrides
- The effective command prefix

No check touches the network; a failed critical check stops the process
before the Discord client is created.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import yaml

from ..config import TOKEN, CONFIG_YAML_PATH, get_setting
from .logging import logger


class CheckStatus(Enum):
    """Status of a startup check."""
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"
    SKIP = "SKIP"


@dataclass
class CheckResult:
    """Result of a single startup check."""
    name: str
    status: CheckStatus
    message: str
    details: Optional[str] = None


class StartupChecker:
    """Performs startup checks to validate configuration."""

    CRITICAL_CHECKS = ("Bot Token", "Command Prefix")

    def __init__(self):
        """Initialize the startup checker."""
        self.results: List[CheckResult] = []

    def _add_result(
        self,
        name: str,
        status: CheckStatus,
        message: str,
        details: Optional[str] = None
    ) -> CheckResult:
        """Add a check result to the results list."""
        result = CheckResult(name=name, status=status, message=message, details=details)
        self.results.append(result)
        return result

    def check_token(self) -> CheckResult:
        """Check if the bot token is configured."""
        if not TOKEN:
            return self._add_result(
                name="Bot Token",
                status=CheckStatus.FAIL,
                message="TOKEN environment variable is not set",
                details="Set TOKEN in your environment or .env file"
            )

        # Discord tokens are three dot-separated segments, well over 50 chars
        if len(TOKEN) < 50:
            return self._add_result(
                name="Bot Token",
                status=CheckStatus.WARN,
                message="TOKEN seems unusually short",
                details="Token may be invalid - verify in Discord Developer Portal"
            )

        return self._add_result(
            name="Bot Token",
            status=CheckStatus.PASS,
            message="Bot token is configured"
        )

    def check_config_file(self) -> CheckResult:
        """Check that config.yaml, when present, parses and has a bot mapping."""
        if not CONFIG_YAML_PATH.exists():
            return self._add_result(
                name="Config File",
                status=CheckStatus.SKIP,
                message="config.yaml not found",
                details="Built-in defaults will be used"
            )

        try:
            with open(CONFIG_YAML_PATH, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            return self._add_result(
                name="Config File",
                status=CheckStatus.WARN,
                message=f"Could not read config.yaml: {type(e).__name__}",
                details="Built-in defaults will be used"
            )

        section = data.get("bot", {}) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            return self._add_result(
                name="Config File",
                status=CheckStatus.WARN,
                message="config.yaml 'bot' section is not a mapping",
                details="Built-in defaults will be used"
            )

        return self._add_result(
            name="Config File",
            status=CheckStatus.PASS,
            message=f"Loaded {CONFIG_YAML_PATH.name}"
        )

    def check_command_prefix(self) -> CheckResult:
        """Check that the effective command prefix is usable."""
        prefix = get_setting("prefix")
        if not isinstance(prefix, str) or not prefix:
            return self._add_result(
                name="Command Prefix",
                status=CheckStatus.FAIL,
                message="Command prefix is empty",
                details="Set bot.prefix in config.yaml or remove it to use the default"
            )

        if any(ch.isspace() for ch in prefix):
            return self._add_result(
                name="Command Prefix",
                status=CheckStatus.FAIL,
                message=f"Command prefix {prefix!r} contains whitespace"
            )

        return self._add_result(
            name="Command Prefix",
            status=CheckStatus.PASS,
            message=f"Using prefix {prefix!r}"
        )

    def run_all_checks(self) -> List[CheckResult]:
        """Run all startup checks and return results."""
        self.results = []  # Reset results

        logger.info("=" * 60)
        logger.info("STARTUP CHECKS")
        logger.info("=" * 60)

        checks = [
            ("Bot Token", self.check_token),
            ("Config File", self.check_config_file),
            ("Command Prefix", self.check_command_prefix),
        ]

        for name, check_func in checks:
            try:
                result = check_func()
            except Exception as e:
                result = self._add_result(
                    name=name,
                    status=CheckStatus.FAIL,
                    message=f"Check failed with error: {type(e).__name__}: {e}"
                )
            self._log_result(result)

        # Summary
        logger.info("-" * 60)
        passed = sum(1 for r in self.results if r.status == CheckStatus.PASS)
        warned = sum(1 for r in self.results if r.status == CheckStatus.WARN)
        failed = sum(1 for r in self.results if r.status == CheckStatus.FAIL)
        skipped = sum(1 for r in self.results if r.status == CheckStatus.SKIP)

        summary = f"Results: {passed} passed"
        if warned:
            summary += f", {warned} warnings"
        if failed:
            summary += f", {failed} failed"
        if skipped:
            summary += f", {skipped} skipped"

        logger.info(summary)
        logger.info("=" * 60)

        return self.results

    def _log_result(self, result: CheckResult) -> None:
        """Log a check result with appropriate formatting."""
        status_icons = {
            CheckStatus.PASS: "✓",
            CheckStatus.WARN: "⚠",
            CheckStatus.FAIL: "✗",
            CheckStatus.SKIP: "○",
        }

        icon = status_icons.get(result.status, "?")
        log_msg = f"[{icon}] {result.name}: {result.message}"

        if result.status == CheckStatus.PASS:
            logger.info(log_msg)
        elif result.status == CheckStatus.WARN:
            logger.warning(log_msg)
            if result.details:
                logger.warning(f"    └─ {result.details}")
        elif result.status == CheckStatus.FAIL:
            logger.error(log_msg)
            if result.details:
                logger.error(f"    └─ {result.details}")
        else:  # SKIP
            logger.info(log_msg)
            if result.details:
                logger.info(f"    └─ {result.details}")

    def has_critical_failures(self) -> bool:
        """Check if any critical check (token, prefix) failed."""
        return any(
            r.name in self.CRITICAL_CHECKS and r.status == CheckStatus.FAIL
            for r in self.results
        )

    def get_failures(self) -> List[CheckResult]:
        """Get all failed check results."""
        return [r for r in self.results if r.status == CheckStatus.FAIL]

    def get_warnings(self) -> List[CheckResult]:
        """Get all warning check results."""
        return [r for r in self.results if r.status == CheckStatus.WARN]


def run_startup_checks(exit_on_critical: bool = True) -> StartupChecker:
    """Run all startup checks and optionally exit on critical failures.

    Args:
        exit_on_critical: If True, raise SystemExit on critical failures.

    Returns:
        The StartupChecker instance with results.

    Raises:
        SystemExit: If exit_on_critical is True and critical checks fail.
    """
    checker = StartupChecker()
    checker.run_all_checks()

    if exit_on_critical and checker.has_critical_failures():
        failures = "; ".join(f"{f.name}: {f.message}" for f in checker.get_failures())
        raise SystemExit(
            f"Critical startup checks failed: {failures}. "
            "Please fix these issues before starting the bot."
        )

    return checker
