"""Log context binding and record stamping."""

import logging

import pytest

from vitalimes.common.logging import ContextFilter, bind_log_context, receipt_ctx, trace_id_ctx


def _record() -> logging.LogRecord:
    return logging.LogRecord("vitalimes", logging.INFO, __file__, 1, "payment_order_created", None, None)


def test_bound_context_is_stamped_on_records():
    """Records carry the bound trace id and receipt, then revert."""

    record = _record()
    with bind_log_context(trace_id="corr-1", receipt="VTL-42"):
        ContextFilter().filter(record)

    assert record.trace_id == "corr-1"
    assert record.receipt == "VTL-42"
    assert record.service_name == "payment-api"
    assert trace_id_ctx.get() == ""
    assert receipt_ctx.get() == ""


def test_nested_binding_restores_outer_value():
    """Inner bindings only shadow the outer value inside their block."""

    with bind_log_context(trace_id="outer"):
        with bind_log_context(trace_id="inner", receipt="VTL-1"):
            assert trace_id_ctx.get() == "inner"
        assert trace_id_ctx.get() == "outer"
        assert receipt_ctx.get() == ""


def test_unknown_field_is_rejected():
    """Only known context fields can be bound."""

    with pytest.raises(TypeError):
        with bind_log_context(payment_id="p-1"):
            pass
