"""
Tests for startup_checks module.
"""

from unittest.mock import patch

import pytest

from src.utils.startup_checks import (
    CheckStatus,
    CheckResult,
    StartupChecker,
    run_startup_checks,
)

VALID_TOKEN = "x" * 60


class TestCheckStatus:
    """Tests for CheckStatus enum."""

    def test_status_values(self):
        """Test that all expected status values exist."""
        assert CheckStatus.PASS.value == "PASS"
        assert CheckStatus.WARN.value == "WARN"
        assert CheckStatus.FAIL.value == "FAIL"
        assert CheckStatus.SKIP.value == "SKIP"


class TestCheckResult:
    """Tests for CheckResult dataclass."""

    def test_create_result_without_details(self):
        result = CheckResult(
            name="Test Check",
            status=CheckStatus.FAIL,
            message="Something failed"
        )
        assert result.details is None


class TestStartupChecker:
    """Tests for StartupChecker class."""

    @pytest.fixture
    def checker(self):
        """Create a fresh startup checker."""
        return StartupChecker()

    def test_init(self, checker):
        assert checker.results == []

    # Token checks

    def test_token_missing(self, checker):
        with patch('src.utils.startup_checks.TOKEN', None):
            result = checker.check_token()
        assert result.status == CheckStatus.FAIL
        assert "TOKEN" in result.message

    def test_token_short(self, checker):
        with patch('src.utils.startup_checks.TOKEN', 'short'):
            result = checker.check_token()
        assert result.status == CheckStatus.WARN

    def test_token_present(self, checker):
        with patch('src.utils.startup_checks.TOKEN', VALID_TOKEN):
            result = checker.check_token()
        assert result.status == CheckStatus.PASS

    # Config file checks

    def test_config_file_missing(self, checker, tmp_path):
        with patch('src.utils.startup_checks.CONFIG_YAML_PATH', tmp_path / "config.yaml"):
            result = checker.check_config_file()
        assert result.status == CheckStatus.SKIP

    def test_config_file_valid(self, checker, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('bot:\n  prefix: "f!"\n', encoding='utf-8')
        with patch('src.utils.startup_checks.CONFIG_YAML_PATH', path):
            result = checker.check_config_file()
        assert result.status == CheckStatus.PASS

    def test_config_file_unparseable(self, checker, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('bot: [unclosed', encoding='utf-8')
        with patch('src.utils.startup_checks.CONFIG_YAML_PATH', path):
            result = checker.check_config_file()
        assert result.status == CheckStatus.WARN

    def test_config_file_bot_not_mapping(self, checker, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('bot: "f!"\n', encoding='utf-8')
        with patch('src.utils.startup_checks.CONFIG_YAML_PATH', path):
            result = checker.check_config_file()
        assert result.status == CheckStatus.WARN

    # Prefix checks

    @pytest.mark.parametrize("prefix,status", [
        ("f!", CheckStatus.PASS),
        ("", CheckStatus.FAIL),
        (None, CheckStatus.FAIL),
        ("f !", CheckStatus.FAIL),
    ])
    def test_command_prefix(self, checker, prefix, status):
        with patch('src.utils.startup_checks.get_setting', return_value=prefix):
            result = checker.check_command_prefix()
        assert result.status == status

    # Aggregation

    def test_run_all_checks(self, checker):
        with patch('src.utils.startup_checks.TOKEN', VALID_TOKEN):
            results = checker.run_all_checks()
        assert [r.name for r in results] == ["Bot Token", "Config File", "Command Prefix"]
        assert not checker.has_critical_failures()

    def test_check_exception_becomes_failure(self, checker):
        with patch('src.utils.startup_checks.TOKEN', VALID_TOKEN), \
             patch.object(StartupChecker, 'check_config_file', side_effect=OSError("disk")):
            results = checker.run_all_checks()
        failures = checker.get_failures()
        assert len(results) == 3
        assert [f.name for f in failures] == ["Config File"]
        assert "OSError" in failures[0].message
        # Config File is not critical
        assert not checker.has_critical_failures()

    def test_get_warnings(self, checker):
        with patch('src.utils.startup_checks.TOKEN', 'short'):
            checker.run_all_checks()
        assert [w.name for w in checker.get_warnings()] == ["Bot Token"]


class TestRunStartupChecks:
    """Tests for run_startup_checks fatal exit behaviour."""

    def test_missing_token_exits_before_connecting(self):
        """
        Without TOKEN the checks raise SystemExit naming the variable and no
        Discord client is ever constructed.
        """
        with patch('src.utils.startup_checks.TOKEN', None), \
             patch('discord.Client.__init__') as mock_client_init:
            with pytest.raises(SystemExit) as exc_info:
                run_startup_checks(exit_on_critical=True)

            mock_client_init.assert_not_called()

        message = str(exc_info.value)
        assert "TOKEN" in message
        assert "Bot Token" in message

    def test_no_exit_when_disabled(self):
        with patch('src.utils.startup_checks.TOKEN', None):
            checker = run_startup_checks(exit_on_critical=False)
        assert checker.has_critical_failures()

    def test_passes_with_token(self):
        with patch('src.utils.startup_checks.TOKEN', VALID_TOKEN):
            checker = run_startup_checks(exit_on_critical=True)
        assert checker.get_failures() == []
