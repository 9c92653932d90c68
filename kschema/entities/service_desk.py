"""
Service desk entities — desk definitions, tickets and ticket status.

Free-text ticket columns (Summary, Organization, Staff) can be filtered on
but not sorted by.
"""

from datetime import datetime

from kschema.entities import REGISTRY

REGISTRY.define("KServiceDesk", category="service_desk",
    description="Service desk definition",
    fields=[
        ("ServiceDeskId", float, True, True),
        ("defaultServDeskDefnFlag", str, True, True),
        ("Prefix", str, True, True),
        ("ServiceDeskName", str, True, True),
        ("Description", str, True, True),
        ("EditingTemplate", str, True, True),
        ("DefinationTemplate", str, True, True),
        ("DisplayMachineInfo", str, True, True),
        ("RequiredMachineInfo", str, True, True),
        ("AutoSaveClock", str, True, True),
        ("AutoInsertNote", str, True, True),
        ("AutoInsertHiddenNote", str, True, True),
        ("ShowIncidentNotePan", str, True, True),
        ("ShowWorkOrders", str, True, True),
        ("ShowSessionTimers", str, True, True),
        ("ShowTasks", str, True, True),
        ("AllowDeleteNotes", str, True, True),
        ("TimeZoneOffset", str, True, True),
        ("DefaultPolicy", str, True, True),
        ("DeskAdministrator", str, True, True),
        ("ChangeProcedure", str, True, True),
        ("GoalProcedure", str, True, True),
        ("AotoArchiveTime", int, True, True),
        ("EmailDisplayName", str, True, True),
    ],
)

# Tickets and ticket status share one column layout.
_TICKET_FIELDS = [
    ("ServiceDeskId", float, True, True),
    ("ServiceDeskTicketId", float, True, True),
    ("TicketRef", str, True, True),
    ("Summary", str, True, False),
    ("TicketStatus", str, True, True),
    ("Stage", str, True, True),
    ("Priority", str, True, True),
    ("Severity", str, True, True),
    ("Category", str, True, True),
    ("Resolution", str, True, True),
    ("Submitter", str, True, True),
    ("Assignee", str, True, True),
    ("Owner", str, True, True),
    ("Organization", str, True, False),
    ("Staff", str, True, False),
    ("Phone", str, False, False),
    ("AgentGuid", float, True, False),
    ("InventoryAssetId", float, True, True),
    ("CreatedDate", datetime, True, True),
    ("ModifiedDate", datetime, True, True),
    ("LastPublicUpdate", datetime, True, True),
    ("Closed", datetime, True, True),
    ("Due", datetime, True, True),
    ("Promised", datetime, True, True),
    ("Escalation", datetime, True, True),
    ("StageGoal", str, True, True),
    ("ResolutionDate", str, True, True),
    ("LockedBy", str, True, True),
    ("LockedOn", datetime, True, True),
    ("SourceType", str, True, True),
    ("Policy", str, True, True),
    ("SubmitterEmail", str, True, True),
]

REGISTRY.define("KTicket", category="service_desk",
    description="Service desk ticket",
    fields=_TICKET_FIELDS,
)

REGISTRY.define("KTicketStatus", category="service_desk",
    description="Status view of a service desk ticket",
    fields=_TICKET_FIELDS,
)
