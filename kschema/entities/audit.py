"""
Audit entities — machine audit summary and per-machine inventory records.

Covers hardware, installed software, licenses, security products, local
accounts and groups collected by agent audits.
"""

from datetime import datetime

from kschema.entities import REGISTRY

# ── Summary ──────────────────────────────────────────────────────

REGISTRY.define("KAuditSummary", category="audit",
    description="Latest audit summary of a machine",
    fields=[
        ("AgentGuid", float, True, False),
        ("DisplayName", str, True, True),
        ("TimezoneOffset", int, False, False),
        ("CurrentLogin", str, True, True),
        ("AgentType", int, False, False),
        ("RebootTime", str, True, True),
        ("LastCheckinTime", str, True, True),
        ("GroupName", str, True, True),
        ("FirstCheckinTime", str, True, True),
        ("TimeZone", str, False, False),
        ("WorkgroupDomainType", int, True, True),
        ("WorkgroupDomainName", str, True, True),
        ("ComputerName", str, True, True),
        ("DnsComputerName", str, True, True),
        ("OsType", str, False, False),
        ("OsInfo", str, True, True),
        ("IpAddress", str, True, True),
        ("Ipv6Address", str, True, True),
        ("SubnetMask", str, True, True),
        ("DefaultGateway", str, True, True),
        ("ConnectionGatewayIp", str, True, True),
        ("GatewayCountry", str, True, True),
        ("MacAddress", str, True, True),
        ("DnsServer1", str, True, True),
        ("DnsServer2", str, True, True),
        ("DhcpEnabled", int, True, True),
        ("DhcpServer", str, True, True),
        ("WinsEnabled", int, True, True),
        ("PrimaryWinsServer", str, True, True),
        ("SecondaryWinsServer", str, True, True),
        ("CpuType", str, True, True),
        ("CpuSpeed", int, True, True),
        ("CpuCount", int, True, True),
        ("RamMBytes", int, True, True),
        ("AgentVersion", int, True, True),
        ("LastLoginName", str, True, True),
        ("LoginName", str, True, True),
        ("PrimaryKServer", str, True, True),
        ("SecondaryKServer", str, True, True),
        ("QuickCheckinPeriod", str, True, True),
        ("ContactName", str, True, True),
        ("ContactEmail", str, True, True),
        ("ContactPhone", str, True, True),
        ("ContactNotes", str, True, True),
        ("Manufacturer", str, True, True),
        ("ProductName", str, True, True),
        ("SystemVersion", str, True, True),
        ("SystemSerialNumber", str, True, True),
        ("ChassisSerialNumber", str, True, True),
        ("ChassisAssetTag", str, True, True),
        ("ExternalBusSpeed", str, True, True),
        ("MaxMemorySize", str, True, True),
        ("MemorySlots", str, True, True),
        ("ChassisManufacturer", str, True, True),
        ("ChassisType", str, True, True),
        ("ChassisVersion", str, True, True),
        ("MotherboardManufacturer", str, True, True),
        ("MotherboardProduct", str, True, True),
        ("MotherboardVersion", str, True, True),
        ("MotherboardSerialNumber", str, True, True),
        ("ProcessorFamily", str, True, True),
        ("ProcessorManufacturer", str, True, True),
        ("ProcessorVersion", str, True, True),
        ("ProcessorMaxSpeed", str, True, True),
        ("ProcessorCurrentSpeed", str, True, True),
        ("FreeSpace", int, True, True),
        ("UsedSpace", int, True, True),
        ("TotalSize", int, True, True),
        ("NumberOfDrives", int, True, True),
    ],
)

# ── Accounts ─────────────────────────────────────────────────────

REGISTRY.define("KCredentials", category="audit",
    description="Credential assigned to an agent",
    fields=[
        ("CredentialId", float, False, False),
        ("Type", str, False, False),
        ("Name", str, False, False),
        ("UserName", str, False, False),
        ("Domain", str, False, False),
        ("CreateAccount", bool, False, False),
        ("AsAdministrator", bool, False, False),
        ("InEffect", bool, False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KLocalUserGroup", category="audit",
    description="Local user group on a machine",
    fields=[
        ("UserGroupName", str, False, False),
        ("Description", str, False, False),
    ],
)

REGISTRY.define("KLocalGroupMember", category="audit",
    description="Member of a local user group",
    fields=[
        ("UserGroupName", str, True, True),
        ("MemberName", str, True, True),
    ],
)

REGISTRY.define("KLocalUserAccount", category="audit",
    description="Local user account on a machine",
    fields=[
        ("LogonName", str, True, True),
        ("FullName", str, True, True),
        ("Description", str, False, False),
        ("IsDisabled", bool, False, False),
        ("IsLockedOut", bool, False, False),
        ("IsPasswordRequired", bool, False, False),
        ("IsPasswordExpired", bool, False, False),
        ("IsPasswordChangeable", bool, False, False),
    ],
)

# ── Hardware ─────────────────────────────────────────────────────

REGISTRY.define("KDiskVolume", category="audit",
    description="Disk volume reported by an audit",
    fields=[
        ("Drive", str, True, True),
        ("Type", str, True, True),
        ("Format", str, True, True),
        ("FreeMBytes", int, False, False),
        ("UsedMBytes", int, False, False),
        ("TotalMBytes", int, False, False),
        ("Label", str, True, True),
    ],
)

REGISTRY.define("KPciAndDisk", category="audit",
    description="PCI card or disk device",
    fields=[
        ("TypeId", int, True, True),
        ("TypeName", str, True, True),
        ("Vendor", str, True, True),
        ("Product", str, True, True),
        ("Note", str, True, True),
    ],
)

REGISTRY.define("KPrinter", category="audit",
    description="Printer attached to a machine",
    fields=[
        ("PrinterName", str, True, True),
        ("Port", str, True, True),
        ("Model", str, True, True),
    ],
)

# ── Software ─────────────────────────────────────────────────────

REGISTRY.define("KAddRemovePrograms", category="audit",
    description="Entry of the add/remove programs list",
    fields=[
        ("DisplayName", str, True, True),
        ("UninstallString", str, False, False),
    ],
)

REGISTRY.define("KApplication", category="audit",
    description="Installed application",
    fields=[
        ("ApplicationName", str, True, True),
        ("Description", str, False, False),
        ("Version", str, False, False),
        ("Manufacturer", str, True, True),
        ("ProductName", str, True, True),
        ("DirectoryPath", str, False, False),
        ("Size", int, False, False),
        ("LastModifiedDate", str, False, True),
    ],
)

REGISTRY.define("KLicense", category="audit",
    description="Software license found on a machine",
    fields=[
        ("Publisher", str, True, True),
        ("ProductName", str, True, True),
        ("ProductKey", str, True, True),
        ("LicenseCode", str, True, True),
        ("Version", str, True, True),
        ("InstallationDate", datetime, True, True),
    ],
)

REGISTRY.define("KSecurityProduct", category="audit",
    description="Antivirus or other security product",
    fields=[
        ("ProductType", str, True, True),
        ("ProductName", str, True, True),
        ("Manufacturer", str, True, True),
        ("Version", str, False, False),
        ("IsActive", bool, True, True, {
            "description": "Declared upstream as KAgentProcedure",
            "tags": ["retyped"],
        }),
        ("IsUpToDate", bool, True, True, {
            "description": "Declared upstream as KAgentProcedure",
            "tags": ["retyped"],
        }),
    ],
)

REGISTRY.define("KStartupApp", category="audit",
    description="Application launched at startup",
    fields=[
        ("AppName", str, True, True),
        ("AppCommand", str, True, True),
        ("UserName", str, True, True),
    ],
)
