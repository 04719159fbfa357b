"""
Tests for ProbeRunner.
"""

from hostvalidate.probes import Probe
from hostvalidate.runner import ProbeRunner
from tests.fixtures import FakeHost


class RecordingProbe(Probe):
    title = "Recording"

    def __init__(self, name, severity="ok", calls=None):
        self.name = name
        self.title = name.title()
        self.severity = severity
        self.calls = calls if calls is not None else []

    def run(self, ledger, host):
        self.calls.append(self.name)
        getattr(ledger, self.severity)(f"{self.name} checked")


class TestProbeRunner:

    def test_runs_each_probe_once_in_order(self, ledger):
        calls = []
        probes = [RecordingProbe(n, calls=calls) for n in ("alpha", "beta", "gamma")]
        ProbeRunner(ledger, FakeHost(), probes=probes).run(timestamp="t")
        assert calls == ["alpha", "beta", "gamma"]

    def test_transcript_layout(self, ledger, output):
        probes = [RecordingProbe("alpha"), RecordingProbe("beta", severity="warn")]
        ProbeRunner(ledger, FakeHost(), probes=probes).run(timestamp="2026-01-02 03:04:05")
        assert output.getvalue() == (
            "\n  XCENA Host Environment Validation\n  2026-01-02 03:04:05\n"
            "\n--- Alpha " + "-" * 35 + "\n"
            "  [  OK  ] alpha checked\n"
            "\n--- Beta " + "-" * 36 + "\n"
            "  [ WARN ] beta checked\n"
            "\n  Summary: 1 OK, 1 WARN, 0 FAIL, 0 INFO\n\n"
        )

    def test_exit_code_zero_without_fail(self, ledger):
        probes = [RecordingProbe("a"), RecordingProbe("b", severity="warn"), RecordingProbe("c", severity="info")]
        assert ProbeRunner(ledger, FakeHost(), probes=probes).run(timestamp="t") == 0

    def test_exit_code_one_with_fail(self, ledger):
        probes = [RecordingProbe("a", severity="fail"), RecordingProbe("b")]
        assert ProbeRunner(ledger, FakeHost(), probes=probes).run(timestamp="t") == 1

    def test_default_timestamp(self, ledger, output):
        ProbeRunner(ledger, FakeHost(), probes=[]).run()
        timestamp = output.getvalue().splitlines()[2].strip()
        assert len(timestamp) == len("2026-01-02 03:04:05")

    def test_default_probes_from_registry(self, ledger):
        runner = ProbeRunner(ledger, FakeHost())
        assert [p.name for p in runner.probes][0] == "system"
        assert len(runner.probes) == 7

    def test_logs_probe_names(self, ledger, mock_logger):
        host = FakeHost(logger=mock_logger)
        ProbeRunner(ledger, host, probes=[RecordingProbe("alpha")]).run(timestamp="t")
        mock_logger.assert_logged('debug', 'Running probe: alpha')
        mock_logger.assert_logged('debug', 'exit code 0')
