"""
Agent entities — agents, agent views, agent-side settings and documents.
"""

from datetime import datetime

from kschema.entities import REGISTRY

# ── Agents ───────────────────────────────────────────────────────

REGISTRY.define("KAgent", category="agents",
    description="Managed machine running the agent",
    fields=[
        ("AgentId", float, True, False),
        ("Online", int, True, False),
        ("OSType", str, True, False),
        ("OSInfo", str, True, False),
        ("AgentName", str, True, True),
        ("OrgId", float, True, False),
        ("MachineGroupId", float, True, False),
        ("MachineGroup", str, True, True),
        ("ComputerName", str, True, True),
        ("IPv6Address", str, True, False),
        ("IPAddress", str, True, False),
        ("OperatingSystem", str, True, True),
        ("OSVersion", str, True, True),
        ("LastLoggedInUser", str, True, True),
        ("LastRebootTime", str, True, True),
        ("LastCheckInTime", str, True, True),
        ("Country", str, True, True),
        ("CurrentUser", str, True, True),
        ("Contact", str, True, True),
        ("TimeZone", str, True, True),
        ("RamMBytes", int, True, True),
        ("CpuCount", int, True, True),
        ("CpuSpeed", int, True, True),
        ("CpuType", str, True, True),
        ("DomainWorkgroup", str, True, True),
        ("AgentFlags", int, True, False),
        ("AgentVersion", int, True, False),
        ("ToolTipNotes", str, False, False),
        ("ShowToolTip", int, False, False),
        ("DefaultGateway", str, False, False),
        ("DNSServer1", str, False, False),
        ("DNSServer2", str, False, False),
        ("DHCPServer", str, False, False),
        ("PrimaryWINS", str, False, False),
        ("SecondaryWINS", str, False, False),
        ("ConnectionGatewayIP", str, False, False),
        ("FirstCheckIn", datetime, True, True),
        ("PrimaryKServer", str, False, False),
        ("SecondaryKServer", str, False, False),
        ("CreationDate", datetime, True, True),
        ("OneClickAccess", bool, False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KAgentView", category="agents",
    description="Saved agent view definition",
    fields=[
        ("ViewDefId", float, False, False),
        ("ViewDefName", str, True, True),
    ],
)

# ── Agent settings ───────────────────────────────────────────────

REGISTRY.define("K2faSettings", category="agents",
    description="Two-factor authentication settings of an agent",
    fields=[
        ("AgentID", float, False, False),
        ("AuthEnabled", bool, False, False),
        ("UseDefaultUser", bool, False, False),
        ("UserName", str, False, False),
        ("SASName", str, False, False),
        ("SiteID", int, False, False),
        ("Note", str, False, False),
    ],
)

REGISTRY.define("KRemoteControlNotifyPolicy", category="agents",
    description="Remote control notification policy",
    fields=[
        ("EmailAddr", str, True, True),
        ("AgentGuid", str, True, True),
        ("AdminGroupId", int, True, True),
        ("RemoteControlNotify", int, True, True),
        ("NotifyText", str, False, False),
        ("AskText", str, False, False),
        ("TerminateNotify", int, True, True),
        ("TerminateText", str, True, True),
        ("RequireRcNote", int, True, True),
        ("RequiteFTPNote", int, True, True),
        ("RecordSession", int, True, True),
    ],
)

# ── Documents ────────────────────────────────────────────────────

_SIZE_RETYPED = {
    "description": "Declared upstream as KScheduledAgentProcedure",
    "tags": ["retyped"],
}

REGISTRY.define("KDocument", category="agents",
    description="Document stored against an agent",
    fields=[
        ("Name", str, True, True),
        ("Size", int, True, True, _SIZE_RETYPED),
        ("LastUploadTime", datetime, True, True),
        ("ParentPath", str, False, False),
        ("IsFile", bool, True, True),
    ],
)

REGISTRY.define("KFile", category="agents",
    description="File in an agent's file store",
    fields=[
        ("Name", str, True, True),
        ("Size", int, True, True, _SIZE_RETYPED),
        ("LastUploadTime", datetime, True, True),
        ("ParentPath", str, False, False),
        ("IsFile", bool, True, True),
    ],
)
