"""
Care Reference MCP Server

Exposes the static reference lookups to other agents over MCP:
- check_iv_compatibility:  Y-site compatibility of two IV drugs
- specialty_insight:       specialty-specific note for a condition
- prioritize_tasks:        severity ranking of a task list

Run with:  python -m care_agent.mcp_server   (PORT defaults to 8080)
"""

import os
import asyncio
import logging
from typing import Annotated

from pydantic import Field, ValidationError
from fastmcp import FastMCP

from care_agent import knowledge
from care_agent.models import PatientTask
from care_agent.task_queue import NO_TASKS, rank

logging.basicConfig(
    format="[%(levelname)s] %(message)s",
    level=logging.INFO
)
logger = logging.getLogger(__name__)

mcp = FastMCP("Care Reference MCP Server")


@mcp.tool()
def check_iv_compatibility(
    drug_a: Annotated[str, Field(description="First IV drug name (e.g. 'dopamine')")],
    drug_b: Annotated[str, Field(description="Second IV drug name (e.g. 'norepinephrine')")],
) -> dict:
    """Check whether two IV drugs can be co-administered through the same line."""
    logger.info(f">>> Tool: 'check_iv_compatibility' called for '{drug_a}' + '{drug_b}'")
    return {"drug_a": drug_a, "drug_b": drug_b, "result": knowledge.check_iv_compatibility(drug_a, drug_b)}


@mcp.tool()
def specialty_insight(
    specialty: Annotated[str, Field(description="Medical specialty (e.g. 'cardiology')")],
    condition: Annotated[str, Field(description="Condition name (e.g. 'heart failure')")],
) -> dict:
    """Look up a specialty-specific management note for a condition."""
    logger.info(f">>> Tool: 'specialty_insight' called for ({specialty}, {condition})")
    return {"specialty": specialty, "condition": condition, "result": knowledge.specialty_insight(specialty, condition)}


@mcp.tool()
def prioritize_tasks(
    tasks: Annotated[
        list,
        Field(description="Tasks as objects with id, patient_id, description and severity (0-255)")
    ]
) -> dict:
    """Rank care tasks by severity; ties keep their original order."""
    logger.info(f">>> Tool: 'prioritize_tasks' called for {len(tasks)} task(s)")
    try:
        parsed = [PatientTask(**t) for t in tasks]
    except (TypeError, ValidationError) as e:
        logger.error(f"    ✗ prioritize_tasks rejected input: {e}")
        return {"top_priority": NO_TASKS, "ranked": [], "error": str(e)}

    ranked = rank(parsed)
    return {
        "top_priority": ranked[0].description if ranked else NO_TASKS,
        "ranked": [{"id": t.id, "description": t.description, "severity": t.severity} for t in ranked],
    }


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))

    logger.info(f"Care Reference MCP Server starting on port {port}")
    asyncio.run(
        mcp.run_async(
            transport="http",
            host="0.0.0.0",
            port=port,
        )
    )
