"""
Asset entities — assets, asset types, probes and discovery records.

KAssetAdvanced nests DeviceFound records, which in turn nest the
hardware sub-records (processors, memory, drives, addresses, PCI).
"""

from kschema.entities import REGISTRY
from kschema.registry import array_of


def _probe_flag(declared):
    return (declared, bool, True, True, {
        "description": "Declared upstream as ProbeType",
        "tags": ["retyped"],
    })


# ── Assets ───────────────────────────────────────────────────────

REGISTRY.define("KAsset", category="assets",
    description="Managed or discovered asset",
    fields=[
        ("AssetId", float, True, False),
        ("AssetName", str, True, True),
        ("AssetTypeId", float, True, True),
        ("ProbeId", float, True, True),
        ("MachineGroupId", float, True, False),
        ("MachineGroup", str, True, True),
        ("OrgId", float, True, False),
        ("IsComputerAgent", bool, True, True),
        ("IsMobileAgent", bool, True, True),
        _probe_flag("IsMonitoring"),
        _probe_flag("IsPatching"),
        _probe_flag("IsAuditing"),
        _probe_flag("IsBackingUp"),
        _probe_flag("IsSecurity"),
        ("TicketCount", float, True, True),
        ("AlarmCount", float, True, True),
        ("IsSNMPActive", bool, True, True),
        ("IsVProActive", bool, True, True),
        ("NetworkInfo", float, True, True),
        ("AgentId", float, True, False),
        ("DisplayName", str, True, True),
        ("LastSeenDate", str, True, True),
        ("ProbeAgentGuid", float, True, True),
        ("PrimaryProbe", str, True, True),
        ("PrimaryProbeId", str, True, True),
        ("NMapProbeId", float, True, True),
        ("HostName", str, True, True),
        ("OSName", str, True, True),
        ("OSType", str, True, True),
        ("OSFamily", str, True, True),
        ("OSGeneration", str, True, True),
        ("DeviceManufacturer", str, True, True),
        ("Attributes", object, True, True),
    ],
)

REGISTRY.define("KAssetAdvanced", category="assets",
    description="Asset with its full discovery detail",
    fields=[
        ("AssetId", float, True, False),
        ("AssetName", str, True, True),
        ("AssetTypeId", float, False, False),
        ("MachineGroupId", float, True, False),
        ("MachineGroup", str, True, True),
        ("OrgId", float, True, False),
        ("AgentId", float, True, False),
        ("DeviceId", float, False, False),
        ("DeviceName", str, True, True),
        ("DeviceType", float, True, True),
        ("DeviceTime", str, False, False),
        ("ServerTime", str, False, False),
        ("DeviceFound", array_of("DeviceFound"), False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KAssetType", category="assets",
    description="Asset type hierarchy node",
    fields=[
        ("AssetTypeId", float, True, False),
        ("AssetTypeName", str, True, True),
        ("ParentAssetTypeId", float, True, False),
        ("Attributes", object, False, False),
    ],
)

# ── Probes ───────────────────────────────────────────────────────

REGISTRY.define("Probe", category="assets",
    description="Discovery probe",
    fields=[
        ("ProbeId", float, True, False),
        ("ProbeTypeId", float, True, False),
        ("ProbeName", str, True, True),
        ("ProbeAgentId", float, False, False),
        ("ProbeType", "ProbeType", False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("ProbeType", category="assets",
    description="Kind of discovery probe",
    fields=[
        ("ProbeTypeId", float, True, False),
        ("ProbeTypeName", str, True, True),
        ("Attributes", object, False, False),
    ],
)

# ── Discovery records ────────────────────────────────────────────

REGISTRY.define("DeviceFound", category="assets",
    description="One discovery of a device by a probe",
    fields=[
        ("DeviceId", float, False, False),
        ("FoundOn", str, False, False),
        ("FoundBy", "Probe", False, False),
        ("DeviceInfo", "DeviceInfo", False, False),
        ("DeviceMotherBoard", "DeviceMotherBoard", False, False),
        ("DeviceBiosInfo", "DeviceBiosInfo", False, False),
        ("DeviceProcessors", array_of("DeviceProcessor"), False, False),
        ("DeviceMemories", array_of("DeviceMemory"), False, False),
        ("DeviceDrives", array_of("DeviceDrive"), False, False),
        ("DeviceIPs", array_of("DeviceIPs"), False, False),
        ("DeviceHwPCI", array_of("DeviceHwPCI"), False, False),
    ],
)

REGISTRY.define("DeviceInfo", category="assets",
    description="Identity and operating system of a discovered device",
    fields=[
        ("HostName", str, False, False),
        ("Manufacturer", str, False, False),
        ("Version", str, False, False),
        ("SerialNumber", str, False, False),
        ("Port", float, False, False),
        ("OSName", str, False, False),
        ("OSType", str, False, False),
        ("OSFamily", str, False, False),
        ("OSVendor", str, False, False),
        ("OSAccuracy", float, False, False),
        ("OSInfo", str, False, False),
        ("OSGeneration", str, False, False),
    ],
)

REGISTRY.define("DeviceMotherBoard", category="assets",
    description="Motherboard of a discovered device",
    fields=[
        ("MotherboardManufacturer", str, False, False),
        ("MotherboardProductName", str, False, False),
        ("MotherboardVersion", str, False, False),
        ("MotherboardSerialNum", str, False, False),
        ("MotherboardAssetTag", str, False, False),
        ("MotherboardReplaceable", str, False, False),
    ],
)

REGISTRY.define("DeviceBiosInfo", category="assets",
    description="BIOS of a discovered device",
    fields=[
        ("BiosVendor", str, False, False),
        ("BiosVersion", str, False, False),
        ("BiosReleaseDate", str, False, False),
        ("BiosSupportedFunctions", str, False, False),
    ],
)

REGISTRY.define("DeviceProcessor", category="assets",
    description="Processor of a discovered device",
    fields=[
        ("ProcessorId", float, False, False),
        ("ProcessorManufacturer", str, False, False),
        ("ProcessorFamily", str, False, False),
        ("ProcessorVersion", str, False, False),
        ("ProcessorMaxSpeed", float, False, False),
        ("ProcessorCurrentSpeed", float, False, False),
        ("ProcessorStatus", str, False, False),
        ("ProcessorUpgradeInfo", str, False, False),
        ("ProcessorSocketPopulated", str, False, False),
        ("ProcessorType", str, False, False),
    ],
)

REGISTRY.define("DeviceMemory", category="assets",
    description="Memory module of a discovered device",
    fields=[
        ("MemoryManufacturer", str, False, False),
        ("MemorySerialNum", str, False, False),
        ("MemorySize", float, False, False),
        ("MemorySpeed", float, False, False),
        ("MemoryType", str, False, False),
    ],
)

REGISTRY.define("DeviceDrive", category="assets",
    description="Drive of a discovered device",
    fields=[
        ("DriveManufacturer", str, False, False),
        ("DriveSocketDesignation", str, False, False),
        ("DriveVersion", str, False, False),
        ("DriveMaxSpeed", float, False, False),
        ("DriveCurrentSpeed", float, False, False),
        ("DriveStatus", str, False, False),
        ("DriveUpgradeInfo", str, False, False),
        ("DriveSocketPopulated", str, False, False),
    ],
)

REGISTRY.define("DeviceIPs", category="assets",
    description="Network address of a discovered device",
    fields=[
        ("IPAddress", str, False, False),
        ("IPAddressType", float, False, False),
        ("SubnetMask", str, False, False),
        ("DHCPEnabled", bool, False, False),
        ("IPv6Address", str, False, False),
        ("MACAddress", str, False, False),
        ("MACManufacturer", str, False, False),
    ],
)

REGISTRY.define("DeviceHwPCI", category="assets",
    description="PCI device of a discovered device",
    fields=[
        ("VendorId", float, False, False),
        ("ProductId", float, False, False),
        ("Revision", float, False, False),
        ("DeviceLocation", str, False, False),
        ("BaseClass", float, False, False),
        ("SubClass", float, False, False),
        ("Bus", float, False, False),
        ("Slot", float, False, False),
        ("SubVendorId", str, False, False),
        ("SubSystemId", str, False, False),
    ],
)
