import logging

from commitai.core.logging import (
    ContextFormatter,
    ContextInjectionFilter,
    ThirdPartyNoiseFilter,
    get_log_context,
    is_app_logger,
    log_context,
    third_party_level,
)


def _record(name: str = "commitai.test", level: int = logging.INFO, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_log_context_nests_and_resets() -> None:
    assert get_log_context() == {}
    with log_context(request_id="a"):
        with log_context(path="/api/ai"):
            assert get_log_context() == {"request_id": "a", "path": "/api/ai"}
        assert get_log_context() == {"request_id": "a"}
    assert get_log_context() == {}


def test_context_filter_copies_fields() -> None:
    record = _record()
    with log_context(request_id="xyz", name="ignored"):
        assert ContextInjectionFilter().filter(record)
    assert getattr(record, "request_id") == "xyz"
    assert record.name == "commitai.test"


def test_formatter_appends_extras() -> None:
    record = _record()
    record.request_id = "xyz"
    formatted = ContextFormatter("%(levelname)s %(message)s").format(record)
    assert formatted == "INFO hello [request_id=xyz]"


def test_formatter_without_extras() -> None:
    formatted = ContextFormatter("%(message)s").format(_record())
    assert formatted == "hello"


def test_app_logger_detection() -> None:
    assert is_app_logger("commitai")
    assert is_app_logger("commitai.access")
    assert is_app_logger("__main__")
    assert not is_app_logger("commitaix")
    assert not is_app_logger("uvicorn")


def test_third_party_levels() -> None:
    assert third_party_level("uvicorn.error") == logging.INFO
    assert third_party_level("uvicorn.access") == logging.WARNING
    assert third_party_level("httpx._client") == logging.WARNING
    assert third_party_level("somelib") == logging.WARNING


def test_noise_filter_drops_third_party_info() -> None:
    noise_filter = ThirdPartyNoiseFilter()
    assert noise_filter.filter(_record("commitai.access"))
    assert noise_filter.filter(_record("uvicorn.error"))
    assert not noise_filter.filter(_record("httpx"))
    assert noise_filter.filter(_record("httpx", level=logging.WARNING))
