"""Tests for the Logfire export decision."""

import pytest

from scribe.config import ObservabilitySettings
from scribe.util.observability import should_send


class TestShouldSend:
    """Explicit flag first, then token presence."""

    @pytest.mark.parametrize(
        "token, flag, expected",
        [
            (None, None, False),
            ("lf-token", None, True),
            ("lf-token", False, False),
            (None, True, True),
        ],
    )
    def test_decision(self, token, flag, expected):
        settings = ObservabilitySettings(logfire_token=token, send_to_logfire=flag)

        assert should_send(settings) is expected
