"""
Agent procedure entities — procedures, schedules, prompts and history.

Scheduling option records (recurrence, distribution, start, exclusion)
carry no query flags; they only appear nested in scheduled procedures.
"""

from datetime import datetime

from kschema.entities import REGISTRY

# ── Procedures ───────────────────────────────────────────────────

REGISTRY.define("KAgentProcedure", category="procedures",
    description="Agent procedure (script) definition",
    fields=[
        ("AgentProcedureId", int, True, False),
        ("AgentProcedureName", str, True, True),
        ("Path", str, True, False),
        ("Description", str, False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KScheduledAgentProcedure", category="procedures",
    description="Agent procedure scheduled on a single agent",
    fields=[
        ("AgentProcedureId", int, True, False),
        ("AgentId", float, True, False),
        ("ServerTimeZone", bool, True, False),
        ("SkipIfOffLine", bool, True, False),
        ("PowerUpIfOffLine", bool, True, False),
        ("ScriptPrompts", "KScriptPrompts", False, False),
        ("Recurrence", "KRecurrenceOptions", False, False),
        ("Distribution", "KDistributionWindow", False, False),
        ("Start", "KStartOptions", False, False),
        ("Exclusion", "KExclusionWindow", False, False),
        ("Attributes", object, False, False),
    ],
)

# ── Prompts ──────────────────────────────────────────────────────

REGISTRY.define("KScriptPrompt", category="procedures",
    description="Single caption/name/value answer to a procedure prompt",
    fields=[
        ("Caption", str, False, False),
        ("Name", str, False, False),
        ("Value", str, False, False),
    ],
)

REGISTRY.define("KScriptPrompts", category="procedures",
    description="Prompt answers passed to a scheduled procedure",
    fields=[
        ("Caption", str, False, False),
        ("Name", str, False, False),
        ("Value", str, False, False),
    ],
)

# ── Scheduling options ───────────────────────────────────────────

REGISTRY.define("KRecurrenceOptions", category="procedures",
    description="Recurrence pattern of a schedule",
    fields=[
        ("Repeat", str, False, False),
        ("Times", int, False, False),
        ("DaysOfWeek", str, False, False),
        ("DayOfMonth", str, False, False),
        ("SpecificDayOfMonth", int, False, False),
        ("MonthOfYear", str, False, False),
        ("EndAt", str, False, False),
        ("EndOn", str, False, False),
        ("EndAfterIntervalTimes", int, False, False),
    ],
)

REGISTRY.define("KDistributionWindow", category="procedures",
    description="Window over which scheduled runs are spread",
    fields=[
        ("Interval", str, False, False),
        ("Magnitude", int, False, False),
    ],
)

REGISTRY.define("KStartOptions", category="procedures",
    description="First run date and time of a schedule",
    fields=[
        ("StartOn", str, False, False),
        ("StartAt", str, False, False),
    ],
)

REGISTRY.define("KExclusionWindow", category="procedures",
    description="Daily window in which a schedule must not run",
    fields=[
        ("From", str, False, False),
        ("To", str, False, False),
    ],
)

# ── History ──────────────────────────────────────────────────────

REGISTRY.define("KAgentProcedureHistory", category="procedures",
    description="Past execution of a procedure on an agent",
    fields=[
        ("ScriptName", str, True, True),
        ("LastExecutionTime", datetime, True, True),
        ("Status", str, True, True),
        ("Admin", str, True, True),
    ],
)

REGISTRY.define("KAgentProcedurePrompts", category="procedures",
    description="Prompt history of a procedure executed on an agent",
    fields=[
        ("ScriptName", str, True, True),
        ("LastExecutionTime", datetime, True, True),
        ("Status", str, True, True),
        ("Admin", str, True, True),
    ],
)
