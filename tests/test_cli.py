"""
CLI tests.

The environment is cleared of GOOGLE_CLOUD_PROJECT and BACKEND_URL so every
command runs on the simulated collaborators.
"""

import asyncio
import io

import pytest

from care_agent import cli
from care_agent.models import AgentMode
from care_agent.settings import Settings


@pytest.fixture(autouse=True)
def offline_env(monkeypatch):
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    monkeypatch.delenv("BACKEND_URL", raising=False)


class TestInteract:

    def test_chatbot_hello(self, capsys):
        assert cli.main(["interact", "hello", "--mode", "chatbot"]) == 0
        assert "Hello! How can I help you today?" in capsys.readouterr().out

    def test_patient_medication_uses_demo_chart(self, capsys):
        assert cli.main(["interact", "when is my medication due?"]) == 0
        assert "Metoprolol" in capsys.readouterr().out

    def test_unknown_patient_starts_with_empty_chart(self, capsys):
        assert cli.main(["interact", "when is my medication", "--patient", "P999"]) == 0
        assert "Is there anything else I can help you with?" in capsys.readouterr().out

    def test_unknown_mode_exits_with_usage(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["interact", "hello", "--mode", "janitor"])
        assert exc_info.value.code == 2

    def test_missing_query_exits_with_usage(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["interact"])
        assert exc_info.value.code == 2


class TestRun:

    def test_reads_queries_until_exit(self, capsys):
        args = cli.build_parser().parse_args(["run", "nurse"])
        stdin = io.StringIO("what next?\n\nexit\nnever answered\n")

        asyncio.run(cli._run(args, Settings(), stdin=stdin))

        out = capsys.readouterr().out.splitlines()
        assert out[0] == AgentMode.NURSE.preamble
        assert out[1].startswith("Top priority: Recheck elevated blood pressure.")
        assert len(out) == 2

    def test_stops_at_end_of_input(self, capsys):
        args = cli.build_parser().parse_args(["run", "chatbot"])

        asyncio.run(cli._run(args, Settings(), stdin=io.StringIO("hello")))

        out = capsys.readouterr().out.splitlines()
        assert out == [AgentMode.CHATBOT.preamble, "Hello! How can I help you today?"]


class TestMonitorVitals:

    def test_reports_vitals(self, capsys):
        assert cli.main(["monitor-vitals", "P001"]) == 0
        assert capsys.readouterr().out.startswith("Vitals for P001:")
