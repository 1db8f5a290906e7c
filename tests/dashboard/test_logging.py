"""Tests for shared/api_logging.py: decorators and file logging."""

from __future__ import annotations

import pytest

from gpstelemetry.models import RecordPage
from shared.api_logging import log_api_call, log_service_call


class _FakeRepo:
    """Minimal class to test logging decorators."""

    @log_api_call
    def find_items(self, imei: str) -> list[str]:
        return ["first", "second"]

    @log_api_call
    def find_page(self, imei: str) -> RecordPage:
        return RecordPage(data=[])

    @log_api_call
    def find_one(self, imei: str) -> object | None:
        return object() if imei else None

    @log_api_call
    def find_failing(self, imei: str) -> list[str]:
        raise ValueError("backend down")

    @log_service_call
    def summarize(self, values: list) -> dict:
        return {"count": len(values)}

    @log_service_call
    def summarize_failing(self) -> None:
        raise RuntimeError("engine error")


@pytest.fixture
def fake_repo():
    return _FakeRepo()


def _log_text(log_dir) -> str:
    return (log_dir / "api_calls.log").read_text(encoding="utf-8")


class TestLogApiCall:
    def test_returns_result(self, fake_repo):
        assert fake_repo.find_items("A") == ["first", "second"]

    def test_logs_call_and_ok(self, fake_repo, api_log_dir):
        fake_repo.find_items("A")
        content = _log_text(api_log_dir)
        assert "CALL: _FakeRepo.find_items('A')" in content
        assert "OK: _FakeRepo.find_items('A') -> 2 items" in content

    def test_page_counts_records(self, fake_repo, api_log_dir):
        fake_repo.find_page("A")
        assert "-> 0 items" in _log_text(api_log_dir)

    def test_single_and_missing_record_counts(self, fake_repo, api_log_dir):
        fake_repo.find_one("A")
        fake_repo.find_one("")
        content = _log_text(api_log_dir)
        assert "find_one('A') -> 1 items" in content
        assert "find_one('') -> 0 items" in content

    def test_logs_keyword_arguments(self, fake_repo, api_log_dir):
        fake_repo.find_items(imei="B")
        assert "_FakeRepo.find_items(imei='B')" in _log_text(api_log_dir)

    def test_logs_failure(self, fake_repo, api_log_dir):
        with pytest.raises(ValueError, match="backend down"):
            fake_repo.find_failing("A")
        content = _log_text(api_log_dir)
        assert "FAIL: _FakeRepo.find_failing('A')" in content
        assert "ValueError" in content

    def test_preserves_function_name(self, fake_repo):
        assert fake_repo.find_items.__name__ == "find_items"


class TestLogServiceCall:
    def test_returns_result(self, fake_repo):
        assert fake_repo.summarize([1, 2, 3]) == {"count": 3}

    def test_logs_service_call(self, fake_repo, api_log_dir):
        fake_repo.summarize([1, 2])
        content = _log_text(api_log_dir)
        assert "SERVICE CALL: _FakeRepo.summarize" in content
        assert "SERVICE OK: _FakeRepo.summarize" in content

    def test_logs_service_failure(self, fake_repo, api_log_dir):
        with pytest.raises(RuntimeError, match="engine error"):
            fake_repo.summarize_failing()
        content = _log_text(api_log_dir)
        assert "SERVICE FAIL: _FakeRepo.summarize_failing" in content
        assert "RuntimeError" in content

    def test_creates_log_directory(self, fake_repo, api_log_dir):
        """Log directory is created on first use."""
        assert not api_log_dir.exists()
        fake_repo.summarize([])
        assert (api_log_dir / "api_calls.log").exists()
