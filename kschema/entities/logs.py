"""
Log entities — agent, alarm, configuration, remote control and event logs.

The seven Windows event log types share one layout. Their User column is
declared upstream with a scheduling type and is catalogued as text.
"""

from datetime import datetime

from kschema.entities import REGISTRY

# ── Agent logs ───────────────────────────────────────────────────

REGISTRY.define("KAgentLog", category="logs",
    description="Agent log entry",
    fields=[
        ("Time", datetime, True, True),
        ("Event", str, True, True),
    ],
)

REGISTRY.define("KAgentProcedureLog", category="logs",
    description="Procedure execution log entry",
    fields=[
        ("LastExecution", datetime, True, True),
        ("ProcedureHistory", str, True, True),
        ("Status", str, True, True),
        ("Admin", str, True, True),
    ],
)

REGISTRY.define("KAlarmLog", category="logs",
    description="Alarm log entry",
    fields=[
        ("Time", datetime, True, True),
        ("Event", str, True, True),
    ],
)

REGISTRY.define("KConfigChangesLog", category="logs",
    description="Configuration change log entry",
    fields=[
        ("Time", datetime, True, True),
        ("Event", str, True, True),
    ],
)

REGISTRY.define("KLegacyRemoteControlLog", category="logs",
    description="Legacy remote control session log entry",
    fields=[
        ("Time", datetime, True, True),
        ("Type", int, True, True),
        ("Duration", int, True, True),
        ("Admin", str, True, True),
    ],
)

REGISTRY.define("KMonitorActionLog", category="logs",
    description="Monitor action log entry",
    fields=[
        ("Time", datetime, True, True),
        ("SNMPDevice", str, True, True),
        ("Type", int, True, True),
        ("Message", str, True, True),
    ],
)

REGISTRY.define("KNetworkStatsLog", category="logs",
    description="Network statistics per application",
    fields=[
        ("NetworkStatID", int, False, False),
        ("Time", datetime, True, True),
        ("Application", str, True, True),
        ("BytesSent", int, False, False),
        ("BytesRcvd", int, False, False),
    ],
)

REGISTRY.define("KRemoteControlLog", category="logs",
    description="Remote control session log entry",
    fields=[
        ("StartTime", datetime, True, True),
        ("LastActiveTime", datetime, True, True),
        ("SessionType", int, True, True),
        ("Admin", str, True, True),
    ],
)

# ── Event logs ───────────────────────────────────────────────────

_EVENT_LOG_FIELDS = [
    ("EventId", int, True, True),
    ("User", str, True, True, {
        "description": "Declared upstream as KScheduledAgentProcedure",
        "tags": ["retyped"],
    }),
    ("Category", str, True, True),
    ("Source", str, True, True),
    ("Type", str, True, True),
    ("Time", datetime, True, True),
]

_EVENT_LOGS = [
    ("KApplicationEventLog", "Application event log entry"),
    ("KDirectoryServiceLog", "Directory service event log entry"),
    ("KDNSServerEventLog", "DNS server event log entry"),
    ("KInternetExplorerLog", "Internet Explorer event log entry"),
    ("KSecurityEventLog", "Security event log entry"),
    ("KSystemEventLog", "System event log entry"),
    ("KLogMonitoringLog", "Log monitoring entry"),
]

for _name, _description in _EVENT_LOGS:
    REGISTRY.define(_name, category="logs",
        description=_description,
        fields=_EVENT_LOG_FIELDS,
    )
