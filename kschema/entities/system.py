"""
System entities — tenants, organizations, departments, machine groups,
roles, scopes, users, and the result envelope of API functions.
"""

from kschema.entities import REGISTRY
from kschema.registry import array_of

# ── Envelope ─────────────────────────────────────────────────────

REGISTRY.define("KFunctions", category="system",
    description="Result envelope returned by API functions",
    fields=[
        ("TotalRecords", int, False, False),
        ("Result", int, False, False),
        ("ResponseCode", int, False, False),
        ("Status", str, False, False),
        ("Error", str, False, False),
    ],
)

# ── Tenancy ──────────────────────────────────────────────────────

REGISTRY.define("KTenant", category="system",
    description="Tenant partition",
    fields=[
        ("Id", float, False, False),
        ("Ref", str, False, False),
        ("Type", str, False, False),
        ("TimeZoneOffset", int, False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KOrganization", category="system",
    description="Customer or internal organization",
    fields=[
        ("OrgId", float, True, False),
        ("OrgName", str, True, True),
        ("OrgRef", str, True, True),
        ("OrgType", str, False, False),
        ("DefaultDepartmentName", str, False, False),
        ("DefaultMachineGroupName", str, False, False),
        ("ParentOrgId", float, True, False),
        ("Website", str, False, False),
        ("NoOfEmployees", int, True, True),
        ("AnnualRevenue", float, True, True),
        ("ContactInfo", "ContactInfo", False, False),
        ("CustomFields", "CustomFields", False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("ContactInfo", category="system",
    description="Contact details of an organization",
    fields=[
        ("PreferredContactMethod", str, False, False),
        ("PrimaryPhone", str, False, False),
        ("PrimaryFax", str, False, False),
        ("PrimaryEmail", str, False, False),
        ("Country", str, False, False),
        ("Street", str, False, False),
        ("City", str, False, False),
        ("State", str, False, False),
        ("ZipCode", str, False, False),
        ("PrimaryTextMessagePhone", str, False, False),
    ],
)

REGISTRY.define("CustomFields", category="system",
    description="Custom field name/value pair",
    fields=[
        ("FieldName", str, False, False),
        ("FieldValue", str, False, False),
    ],
)

REGISTRY.define("KDepartment", category="system",
    description="Department of an organization",
    fields=[
        ("DepartmentId", float, True, False),
        ("DepartmentName", str, True, True),
        ("ParentDepartmentId", float, True, False),
        ("ManagerId", float, True, False),
        ("OrgId", float, True, False),
        ("DepartmentRef", str, True, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KMachineGroup", category="system",
    description="Machine group of an organization",
    fields=[
        ("MachineGroupId", float, True, False),
        ("MachineGroupName", str, True, True),
        ("ParentMachineGroupId", float, True, False),
        ("OrgId", float, True, True),
        ("Attributes", object, False, False),
    ],
)

# ── Access control ───────────────────────────────────────────────

REGISTRY.define("KUserRole", category="system",
    description="User role",
    fields=[
        ("RoleId", int, True, False),
        ("RoleName", str, True, True),
        ("RoleTypeIds", array_of(float), False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KUserRoleType", category="system",
    description="Kind of user role",
    fields=[
        ("RoleTypeId", float, True, False),
        ("RoleTypeName", str, True, True),
        ("RoleTypeDescription", str, False, False),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KScope", category="system",
    description="Scope limiting what a user can see",
    fields=[
        ("ScopeId", float, True, False),
        ("ScopeName", str, True, True),
        ("Attributes", object, False, False),
    ],
)

REGISTRY.define("KUser", category="system",
    description="VSA user (administrator)",
    fields=[
        ("UserId", int, True, False),
        ("AdminName", str, True, True),
        ("AdminPassword", str, True, True),
        ("Admintype", int, False, False),
        ("DisableUntil", str, False, False),
        ("CreationDate", str, False, False),
        ("AdminScopeIds", array_of(float), False, False),
        ("AdminRoleIds", array_of(int), False, False),
        ("FirstName", str, True, True),
        ("LastName", str, True, True),
        ("DefaultStaffOrgId", float, False, False),
        ("DefaultStaffDepartmentId", float, False, False),
        ("Email", str, True, True),
        ("Attributes", object, False, False),
    ],
)
