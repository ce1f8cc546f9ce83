"""Тесты Confirmation Gate."""

from probedesk.gate import confirmation_gate, confirmation_message
from probedesk.models import ProbeResult, ResultKind


class CountingAction:
    def __init__(self):
        self.calls = 0

    def __call__(self) -> ProbeResult:
        self.calls += 1
        return ProbeResult(kind=ResultKind.OK, text="done")


class TestConfirmationGate:
    def test_refuses_without_confirmation(self):
        action = CountingAction()
        r = confirmation_gate("Flushing DNS", False, action)
        assert r.kind is ResultKind.CONFIRMATION_REQUIRED
        assert r.text == "Flushing DNS requires explicit confirmation to proceed."
        assert action.calls == 0

    def test_delegates_exactly_once(self):
        action = CountingAction()
        r = confirmation_gate("Flushing DNS", True, action)
        assert r.text == "done"
        assert action.calls == 1

    def test_message(self):
        assert confirmation_message("Restoring health") == (
            "Restoring health requires explicit confirmation to proceed."
        )
