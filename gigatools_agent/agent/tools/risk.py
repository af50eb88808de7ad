"""Static risk-incident tool backed by demo data."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from gigatools_agent.agent.tools.base import FunctionTool, ToolDescriptor, ToolResult

FIELD_SEPARATOR = "|"
RECORD_SEPARATOR = ";"


@dataclass(frozen=True)
class RiskRecord:
    """A single recorded incident and the money it cost."""

    id: str
    date: str
    reason: str
    lost_amount: int

    def serialize(self) -> str:
        return FIELD_SEPARATOR.join((self.id, self.date, self.reason, str(self.lost_amount)))


RISK_RECORDS: tuple[RiskRecord, ...] = (
    RiskRecord("EVE-1", "2025-04-11", "theft", 1000),
    RiskRecord("EVE-2", "2025-03-11", "flooded", 5000),
    RiskRecord("EVE-3", "2025-02-11", "hardware failure", 6000),
    RiskRecord("EVE-4", "2025-01-11", "PC failure", 3000),
)


def serialize_records(records: tuple[RiskRecord, ...]) -> str:
    """Join records into ``ID|date|reason|lost;`` form, every record terminated."""
    return "".join(record.serialize() + RECORD_SEPARATOR for record in records)


# Must follow RISK_RECORDS.
RISK_REPORT = serialize_records(RISK_RECORDS)

RISK_INCIDENTS = ToolDescriptor(
    name="get_risk_incidents",
    description=(
        "use this method to get the list of incidents, it will return the list of incidents "
        "in the format ID|date in yyyy-MM-dd format|reason|lostMoney|;"
    ),
)


def get_risk_incidents() -> ToolResult:
    logger.info("get_risk_incidents")
    return ToolResult(result=RISK_REPORT)


def risk_tool() -> FunctionTool:
    return FunctionTool(RISK_INCIDENTS, get_risk_incidents)
