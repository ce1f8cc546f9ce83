"""Тесты моделей данных ProbeDesk."""

from datetime import datetime

import pytest
from probedesk.models import (
    DEFAULT_TRACE_SAMPLES,
    ProbeContext,
    ProbeResult,
    Report,
    ReportSection,
    ResultKind,
    RunConfig,
)


def make_report(*sections: tuple[str, str]) -> Report:
    """Создать отчёт из пар (заголовок, тело)."""
    report = Report()
    for title, body in sections:
        report.add(title, body)
    return report


class TestProbeResult:
    def test_create_minimal(self):
        r = ProbeResult(kind=ResultKind.OK, text="ok")
        assert r.error is None
        assert r.failed is False

    def test_failed_only_for_execution_errors(self):
        assert ProbeResult(kind=ResultKind.EXECUTION_FAILED, text="x", error="e").failed
        assert not ProbeResult(kind=ResultKind.CONFIRMATION_REQUIRED, text="x").failed
        assert not ProbeResult(kind=ResultKind.VALIDATION_FAILED, text="x").failed

    def test_frozen(self):
        r = ProbeResult(kind=ResultKind.OK, text="ok")
        with pytest.raises(Exception):
            r.text = "changed"  # type: ignore

    def test_json_serialization(self):
        d = ProbeResult(kind=ResultKind.EMPTY_OUTPUT, text="none").model_dump(mode="json")
        assert d["kind"] == "empty_output"


class TestReport:
    def test_section_render(self):
        assert ReportSection(title="A", body="body-a").render() == "=== A ===\nbody-a\n\n"

    def test_render_is_deterministic(self):
        sections = [("A", "body-a"), ("B", "body-b")]
        expected = "=== A ===\nbody-a\n\n=== B ===\nbody-b\n\n"
        assert make_report(*sections).render() == expected
        assert make_report(*sections).render() == expected

    def test_empty_report_renders_empty(self):
        assert Report().render() == ""

    def test_header(self):
        r = Report.with_header("alice", datetime(2025, 3, 4, 5, 6, 7))
        r.add("System", "Windows")
        assert r.render() == (
            "Report generated by: alice\nDate: 2025-03-04 05:06:07\n\n"
            "=== System ===\nWindows\n\n"
        )

    def test_titles_keep_order(self):
        assert make_report(("B", "1"), ("A", "2")).titles() == ["B", "A"]


class TestRunConfig:
    def test_defaults(self):
        c = RunConfig()
        assert c.confirmed is False
        assert c.report_format is None
        assert c.trace_samples == DEFAULT_TRACE_SAMPLES

    def test_default_samples_cover_internal_and_public(self):
        assert len(DEFAULT_TRACE_SAMPLES) >= 2
        assert "8.8.8.8" in DEFAULT_TRACE_SAMPLES


class TestProbeContext:
    def test_execute_must_be_callable(self):
        with pytest.raises(Exception):
            ProbeContext(execute="powershell")  # type: ignore

    def test_defaults(self):
        ctx = ProbeContext(execute=lambda script: ("", None))
        assert ctx.remote is None
        assert ctx.confirmed is False
