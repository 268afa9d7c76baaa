"""Unit tests for log redaction and audit logging."""

import logging
from decimal import Decimal
from unittest.mock import patch

from hotel_reservations.logging import (
    CardNumberRedactingFilter,
    _redact_card_numbers,
    redact_card_numbers,
)
from hotel_reservations.logging.audit import AuditEventType, AuditLogger


def test_redact_card_numbers_keeps_last_four():
    """Test 13-19 digit numbers are masked down to their last four digits."""
    assert redact_card_numbers("card 4111111111111111 used") == "card ****1111 used"
    assert redact_card_numbers("acct 12345678901234567890") == "acct 12345678901234567890"
    assert redact_card_numbers("4111111111111") == "****1111"


def test_redact_leaves_short_numbers_and_dates():
    """Test amounts, dates and short codes are untouched."""
    text = "total 400.00 on 2025-12-15 bank code 0001"
    assert redact_card_numbers(text) == text


def test_structlog_processor_redacts_string_values():
    """Test the structlog processor masks every string value."""
    event = {"event": "payment_charged", "details": "card 5555555555554444", "amount": 10}

    result = _redact_card_numbers(None, "info", event)

    assert result["details"] == "card ****4444"
    assert result["amount"] == 10


def test_stdlib_filter_redacts_message_and_args():
    """Test the stdlib filter masks message text and string args."""
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="charged %s with 4111111111111111",
        args=("5555555555554444",),
        exc_info=None,
    )

    assert CardNumberRedactingFilter().filter(record) is True
    assert record.msg == "charged %s with ****1111"
    assert record.args == ("****4444",)


def test_audit_log_event_structure():
    """Test audit entries carry the standard fields."""
    with patch("hotel_reservations.logging.audit.logger") as mock_logger:
        AuditLogger.log_reservation_confirmed(
            actor_id="12345678",
            reservation_id="res-1",
            amount=Decimal("400.00"),
            payment_method="Credit Card",
        )

    mock_logger.info.assert_called_once()
    args, kwargs = mock_logger.info.call_args
    assert args == ("audit_event",)
    assert kwargs["event_type"] == AuditEventType.RESERVATION_CONFIRMED.value
    assert kwargs["actor_id"] == "12345678"
    assert kwargs["resource_type"] == "reservation"
    assert kwargs["resource_id"] == "res-1"
    assert kwargs["success"] is True
    assert kwargs["metadata"] == {"amount": "400.00", "payment_method": "Credit Card"}
    assert "timestamp" in kwargs
    assert "error" not in kwargs


def test_audit_payment_failed_is_marked_unsuccessful():
    """Test failed payments are audited with success=False and an error."""
    with patch("hotel_reservations.logging.audit.logger") as mock_logger:
        AuditLogger.log_payment_failed("12345678", "res-1", Decimal("400.00"), "Debit Card")

    kwargs = mock_logger.info.call_args.kwargs
    assert kwargs["event_type"] == "payment_failed"
    assert kwargs["success"] is False
    assert kwargs["error"]
