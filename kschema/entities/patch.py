"""
Patch management entities — per-machine patch status and patches.
"""

from datetime import datetime

from kschema.entities import REGISTRY


def _renamed(declared):
    return {"description": f"Declared upstream as {declared}", "tags": ["renamed"]}


# Status fields are returned whole; none of them can be queried on.
REGISTRY.define("KPatchStatus", category="patch",
    description="Patch scan and reboot settings of a machine",
    fields=[
        ("AgentType", int, False, False),
        ("LastPatchScan", datetime, False, False,
            _renamed("LastPatchScanstring")),
        ("ExecScriptTime", datetime, False, False,
            _renamed("ExecScriptTimestring")),
        ("RunCount", int, False, False),
        ("MonthPeriod", int, False, False),
        ("ExecPeriod", int, False, False),
        ("RunAtTime", int, False, False),
        ("NextPatchScan", int, False, False),
        ("NextRunTime", str, False, False),
        ("ScheduledScanScriptId", int, False, False),
        ("ScheduledScanScriptSchedType", int, False, False),
        ("ScanRunAtTime", int, False, False),
        ("ScanNextRunTime", datetime, False, False,
            _renamed("ScanNextRunTimestring")),
        ("NewPatchAlert", int, False, False),
        ("PatchFailedAlert", int, False, False),
        ("InvalidCredentialAlert", int, False, False),
        ("WINAUChangedAlert", int, False, False),
        ("AlertEmail", str, False, False, _renamed("AlertEmailstring")),
        ("SourceMachineGuid", str, False, False,
            _renamed("SourceMachineGuidstring")),
        ("LanCacheName", str, False, False, _renamed("LanCacheNamestring")),
        ("PreRebootScriptName", str, False, False,
            _renamed("PreRebootScriptNamestring")),
        ("PostRebootScriptName", str, False, False,
            _renamed("PostRebootScriptNamestring")),
        ("ScanResultsPending", str, False, False,
            _renamed("ScanResultsPendingstring")),
        ("Reset", int, False, False),
        ("RbWarn", str, False, False, _renamed("RbWarnstring")),
        ("RebootDay", str, False, False, _renamed("RebootDaystring")),
        ("RebootTime", str, False, False, _renamed("RebootTimestring")),
        ("NoRebootEmail", str, False, False, _renamed("NoRebootEmailstring")),
        ("SourceType", int, False, False),
        ("SourcePath", str, False, False, _renamed("SourcePathstring")),
        ("SourceLocal", str, False, False, _renamed("SourceLocalstring")),
        ("DestUseAgentDrive", int, False, False),
        ("UseInternetSrcFallback", int, False, False),
    ],
)

REGISTRY.define("KPatch", category="patch",
    description="Patch known to a machine",
    fields=[
        ("PatchDataId", int, True, True),
        ("UpdateClassification", int, True, True),
        ("UpdateCategory", int, True, True),
        ("KBArticleId", str, False, True),
        ("KBArticleLink", str, False, False),
        ("SecurityBulletinId", str, False, True),
        ("SecurityBulletinLink", str, False, False),
        ("UpdateTitle", str, False, False),
        ("LastPublishedDate", datetime, True, True),
        ("LocationPending", int, True, True),
        ("LocationId", int, False, False),
        ("BulletinId", str, False, True),
        ("PatchState", int, True, True),
        ("InstallDate", datetime, True, True),
        ("Ignore", int, True, True),
        ("ProductId", int, True, True),
        ("ApprovalStatus", int, True, True),
        ("Location", str, False, False),
        ("WuaOverrideFlag", int, True, True),
        ("Switches", str, False, False),
        ("ProductName", str, True, True),
        ("IsSuperseded", bool, True, True),
        ("WuaProductId", int, True, True),
    ],
)
