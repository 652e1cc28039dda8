"""
General-purpose vocabularies: store events, workflow states, user roles,
and data sensitivity levels.
"""

from enum import Enum

from vocab.registry import KeywordDefinition, build_enum_registry, build_registry


class EventType(str, Enum):
    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
    STATE_CHANGE = "State Change"
    CORRECTED = "Corrected"


class WorkflowStatus(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CANCELLED = "CANCELLED"


# ── Store events ──────────────────────────────────────────────────

# Member values double as labels
EVENT_TYPE = build_enum_registry("eventType", EventType)

WORKFLOW_STATUS = build_enum_registry(
    "workflowStatus", WorkflowStatus,
    format_label=lambda value, name: value.capitalize(),
)

# ── Access ────────────────────────────────────────────────────────

USER_ROLE = build_registry("userRole", {
    "admin": KeywordDefinition(value="app-admin", label="Administrator"),
    "trader": "Trader",
    "riskManager": "Risk Manager",
    "viewer": {"label": "Read-only"},
})

SENSITIVITY = build_registry("sensitivity", {
    "public": {},
    "internal": {},
    "confidential": {},
    "pii": {"label": "PII"},
})

REGISTRIES = [EVENT_TYPE, WORKFLOW_STATUS, USER_ROLE, SENSITIVITY]
