"""Prometheus Metrics テスト"""

import pytest
from prometheus_client import REGISTRY

from notifications_core.dtos.sms import SMSResponseDTO
from notifications_core.providers.sms import SMSProvider
from notifications_core.services.sms import SMSService


def _sent_count(channel: str, status: str) -> float:
    return REGISTRY.get_sample_value("notifications_sent_total", {"channel": channel, "status": status}) or 0.0


class StaticSMSProvider(SMSProvider):
    def __init__(self, response: SMSResponseDTO | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error

    async def send_sms(self, request):
        if self._error:
            raise self._error
        return self._response


@pytest.mark.unit
class TestNotificationMetrics:
    """サービス呼び出しごとのメトリクス記録"""

    async def test_sent_counter(self, sms_request) -> None:
        before = _sent_count("sms", "sent")
        await SMSService(StaticSMSProvider(SMSResponseDTO.sent("m-1"))).send_sms(sms_request)
        assert _sent_count("sms", "sent") == before + 1

    async def test_failed_counter(self, sms_request) -> None:
        before = _sent_count("sms", "failed")
        await SMSService(StaticSMSProvider(SMSResponseDTO.failed("rejected"))).send_sms(sms_request)
        assert _sent_count("sms", "failed") == before + 1

    async def test_provider_error_counter(self, sms_request) -> None:
        labels = {"channel": "sms", "error_type": "ConnectionError"}
        before = REGISTRY.get_sample_value("notification_provider_errors_total", labels) or 0.0
        await SMSService(StaticSMSProvider(error=ConnectionError("down"))).send_sms(sms_request)
        assert REGISTRY.get_sample_value("notification_provider_errors_total", labels) == before + 1

    async def test_duration_observed(self, sms_request) -> None:
        before = REGISTRY.get_sample_value("notification_send_duration_seconds_count", {"channel": "sms"}) or 0.0
        await SMSService(StaticSMSProvider(SMSResponseDTO.sent("m-1"))).send_sms(sms_request)
        after = REGISTRY.get_sample_value("notification_send_duration_seconds_count", {"channel": "sms"})
        assert after == before + 1
