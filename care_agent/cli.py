"""
Command-line entry point.

  care-agent interact "what's my medication schedule?" --mode patient
  care-agent run nurse              # one query per stdin line, 'exit' to stop
  care-agent monitor-vitals P001
"""

import argparse
import asyncio
import logging
import sys
from datetime import timedelta

from care_agent.config import AgentBuilder, gemini_transcoder
from care_agent.engine import Agent
from care_agent.errors import CollaboratorError, ConfigurationError
from care_agent.models import AgentMode, PatientRecord, PatientTask, UserPreferences
from care_agent.services.record_store import load_chart
from care_agent.settings import Settings

logger = logging.getLogger(__name__)

MODES = [m.value for m in AgentMode]
EXIT_WORDS = ("exit", "quit")


def demo_tasks(patient_id: str):
    return [
        PatientTask(id=1, patient_id=patient_id, description="Reposition patient to prevent pressure injury", severity=40),
        PatientTask(id=2, patient_id=patient_id, description="Recheck elevated blood pressure", severity=180,
                    time_criticality=timedelta(minutes=30)),
        PatientTask(id=3, patient_id=patient_id, description="Collect morning blood samples", severity=90),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="care-agent", description="Role-aware ward care assistant")
    sub = parser.add_subparsers(dest="command", required=True)

    interact = sub.add_parser("interact", help="answer a single query")
    interact.add_argument("query")
    interact.add_argument("--voice", action="store_true", help="route the query through the speech transcoder")
    interact.add_argument("--mode", choices=MODES, default=AgentMode.PATIENT.value)
    interact.add_argument("--patient", default="P001")
    interact.add_argument("--language", default=None)

    run = sub.add_parser("run", help="interactive session in one mode")
    run.add_argument("mode", choices=MODES)
    run.add_argument("--patient", default="P001")

    monitor = sub.add_parser("monitor-vitals", help="report and log a patient's vitals")
    monitor.add_argument("patient_id")
    return parser


async def make_agent(settings: Settings, mode: AgentMode, patient_id: str,
                     voice: bool = False, language: str = None) -> Agent:
    builder = AgentBuilder.from_settings(settings)
    try:
        chart = await load_chart(builder.record_store, patient_id)
    except CollaboratorError as e:
        logger.warning(f"[CLI] Starting with an empty chart: {e}")
        chart = PatientRecord(patient_id=patient_id)

    preferences = UserPreferences(role=mode, language=language or settings.language, voice_enabled=voice)
    builder = builder.with_preferences(preferences).with_chart(chart).with_tasks(demo_tasks(patient_id))
    if voice and settings.project_id:
        builder = builder.with_transcoder(gemini_transcoder(settings))
    return builder.build()


async def _interact(args, settings: Settings) -> None:
    agent = await make_agent(settings, AgentMode(args.mode), args.patient, args.voice, args.language)
    print(await agent.interact(args.query))


async def _run(args, settings: Settings, stdin=None) -> None:
    agent = await make_agent(settings, AgentMode(args.mode), args.patient)
    print(agent.mode.preamble)
    stream = stdin or sys.stdin
    while True:
        line = await asyncio.to_thread(stream.readline)
        if not line:
            break
        query = line.strip()
        if not query:
            continue
        if query.lower() in EXIT_WORDS:
            break
        print(await agent.interact(query))


async def _monitor(args, settings: Settings) -> None:
    agent = await make_agent(settings, AgentMode.NURSE, args.patient_id)
    print(await agent.monitor(args.patient_id))


COMMANDS = {
    "interact": _interact,
    "run": _run,
    "monitor-vitals": _monitor,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    logging.basicConfig(format="[%(levelname)s] %(message)s", level=settings.log_level)

    try:
        asyncio.run(COMMANDS[args.command](args, settings))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
