"""
Tests for the bundled keyword catalog.

Covers:
- KEYWORDS contains every registry from the domain modules
- Representative keys and labels per domain
- Catalog invariants (unique keys, non-empty labels, read-only)
"""

import pytest

from vocab.catalog import KEYWORDS, REGISTRIES, general, trading
from vocab.table import resolve_label


class TestCatalog:

    def test_all_entries_merged(self):
        assert len(KEYWORDS) == sum(len(r) for r in REGISTRIES)

    def test_registries_from_both_domains(self):
        for reg in trading.REGISTRIES + general.REGISTRIES:
            assert reg in REGISTRIES

    @pytest.mark.parametrize("key, label", [
        ("SIDE_BUY", "Buy"),
        ("ORDER_TYPE_LIMIT", "Limit"),
        ("ORDER_TYPE_STOP_LIMIT", "Stop-Limit"),
        ("ORDER_STATUS_FILLED", "Filled"),
        ("SIGNAL_DIRECTION_FLAT", "Flat / No Position"),
        ("EVENT_TYPE_STATE_CHANGE", "State Change"),
        ("WORKFLOW_STATUS_SUCCESS", "Success"),
        ("USER_ROLE_APP_ADMIN", "Administrator"),
        ("USER_ROLE_RISK_MANAGER", "Risk Manager"),
        ("USER_ROLE_VIEWER", "Read-only"),
        ("SENSITIVITY_CONFIDENTIAL", "Confidential"),
        ("SENSITIVITY_PII", "PII"),
    ])
    def test_labels(self, key, label):
        assert resolve_label(KEYWORDS, key, strict=True) == label

    def test_order_status_keys_from_enum(self):
        for status in trading.OrderStatus:
            assert trading.ORDER_STATUS.keys[status.name] == f"ORDER_STATUS_{status.value}"

    def test_user_role_names(self):
        assert general.USER_ROLE.key_for("admin") == "USER_ROLE_APP_ADMIN"

    def test_every_label_non_empty(self):
        for key, entry in KEYWORDS.items():
            assert entry.label, f"Keyword '{key}' missing label"
            assert entry.key == key

    def test_read_only(self):
        with pytest.raises(TypeError):
            KEYWORDS["SIDE_SHORT"] = None
