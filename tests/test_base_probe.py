"""Тесты базовых классов зонда."""

import pytest
from probedesk.invoker import INVALID_TARGET, wrap_command
from probedesk.models import ProbeContext, ProbeResult, ResultKind
from probes.base import BaseProbe, CommandProbe, GatedProbe, HostProbe


class RecordingExecutor:
    def __init__(self, output: str = "ok"):
        self.output = output
        self.scripts: list[str] = []

    def __call__(self, script: str):
        self.scripts.append(script)
        return self.output, None


class EchoProbe(CommandProbe):
    """Минимальная реализация зонда для тестирования."""
    name = "echo"
    platform = "test"
    command = "Write-Output hi"


class DangerProbe(GatedProbe):
    name = "danger"
    platform = "test"
    operation = "Doing danger"
    command = "Remove-Everything"


class LookupProbe(HostProbe):
    name = "lookup"
    platform = "test"
    kind = "target"
    title = "Lookup"
    command_template = "nslookup {host}"


class TestBaseProbe:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseProbe()  # type: ignore

    def test_repr(self):
        assert "echo" in repr(EchoProbe())


class TestCommandProbe:
    def test_runs_command(self):
        ex = RecordingExecutor("hi")
        r = EchoProbe().run(ProbeContext(execute=ex))
        assert r == ProbeResult(kind=ResultKind.OK, text="hi")
        assert ex.scripts == [wrap_command("Write-Output hi")]

    def test_ignores_target(self):
        ex = RecordingExecutor()
        EchoProbe().run(ProbeContext(execute=ex), "8.8.8.8")
        assert "8.8.8.8" not in ex.scripts[0]


class TestGatedProbe:
    def test_default_kind_is_one_off(self):
        assert DangerProbe().kind == "one-off"

    def test_without_confirmation_nothing_runs(self):
        ex = RecordingExecutor()
        r = DangerProbe().run(ProbeContext(execute=ex, confirmed=False))
        assert r.kind is ResultKind.CONFIRMATION_REQUIRED
        assert r.text == "Doing danger requires explicit confirmation to proceed."
        assert ex.scripts == []

    def test_with_confirmation_runs_once(self):
        ex = RecordingExecutor("done")
        r = DangerProbe().run(ProbeContext(execute=ex, confirmed=True))
        assert r.text == "done"
        assert len(ex.scripts) == 1


class TestHostProbe:
    def test_formats_command(self):
        ex = RecordingExecutor()
        LookupProbe().run(ProbeContext(execute=ex), "example.com")
        assert ex.scripts == [wrap_command("nslookup example.com")]

    def test_section_title(self):
        assert LookupProbe().section_title("8.8.8.8") == "Lookup (8.8.8.8)"

    @pytest.mark.parametrize("target", [None, "", "example.com && calc"])
    def test_invalid_target_not_executed(self, target):
        ex = RecordingExecutor()
        r = LookupProbe().run(ProbeContext(execute=ex), target)
        assert r.kind is ResultKind.VALIDATION_FAILED
        assert r.text == INVALID_TARGET
        assert ex.scripts == []
