"""
Tests for token normalization.

Covers:
- camelCase, snake_case, kebab-case, and space separated inputs
- Separator collapsing and trimming
- Empty / blank / separator-only rejection
- Idempotence
"""

import pytest

from vocab.errors import InvalidInputError
from vocab.normalize import normalize_category, normalize_keyword_value, normalize_token


# ===========================================================================
# A. Formats
# ===========================================================================

class TestFormats:

    @pytest.mark.parametrize("raw, expected", [
        ("userRole", "USER_ROLE"),
        ("paymentMethod", "PAYMENT_METHOD"),
        ("orderStatus", "ORDER_STATUS"),
    ])
    def test_camel_case(self, raw, expected):
        assert normalize_category(raw) == expected

    def test_snake_case_unchanged(self):
        assert normalize_category("user_role") == "USER_ROLE"
        assert normalize_category("payment_method") == "PAYMENT_METHOD"

    def test_kebab_case(self):
        assert normalize_category("user-role") == "USER_ROLE"
        assert normalize_category("payment-method") == "PAYMENT_METHOD"

    def test_space_separated(self):
        assert normalize_category("user role") == "USER_ROLE"
        assert normalize_category("payment method") == "PAYMENT_METHOD"

    def test_case_insensitive(self):
        assert normalize_category("userRole") == "USER_ROLE"
        assert normalize_category("UserRole") == "USER_ROLE"
        assert normalize_category("USER_ROLE") == "USER_ROLE"

    def test_digit_before_capital_splits(self):
        assert normalize_keyword_value("version2Beta") == "VERSION2_BETA"

    def test_digit_before_letter_splits(self):
        assert normalize_keyword_value("oauth2client") == "OAUTH2_CLIENT"
        assert normalize_keyword_value("x2l") == "X2_L"

    def test_digit_letter_case_invariant(self):
        assert normalize_category("s3bucket") == "S3_BUCKET"
        assert normalize_category("S3BUCKET") == "S3_BUCKET"
        assert normalize_category("s3Bucket") == "S3_BUCKET"

    def test_mixed_separators(self):
        assert normalize_keyword_value("credit-card payment_type") == \
            "CREDIT_CARD_PAYMENT_TYPE"


# ===========================================================================
# B. Separators
# ===========================================================================

class TestSeparators:

    def test_repeated_separators_collapse(self):
        assert normalize_category("user__role") == "USER_ROLE"
        assert normalize_category("user---role") == "USER_ROLE"
        assert normalize_category("user   role") == "USER_ROLE"

    def test_leading_trailing_stripped(self):
        assert normalize_category("  userRole  ") == "USER_ROLE"
        assert normalize_category("_userRole_") == "USER_ROLE"
        assert normalize_category("-userRole-") == "USER_ROLE"

    def test_punctuation_becomes_separator(self):
        assert normalize_keyword_value("a.b/c") == "A_B_C"


# ===========================================================================
# C. Rejection
# ===========================================================================

class TestRejection:

    def test_empty_category(self):
        with pytest.raises(InvalidInputError, match="category must be a non-empty string"):
            normalize_category("")

    def test_blank_category(self):
        with pytest.raises(InvalidInputError, match="category must be a non-empty string"):
            normalize_category("   ")

    def test_empty_value(self):
        with pytest.raises(InvalidInputError,
                           match="keyword value must be a non-empty string"):
            normalize_keyword_value("")

    def test_separator_only(self):
        """Input with no letters or digits normalizes to nothing."""
        with pytest.raises(InvalidInputError, match="non-empty string"):
            normalize_keyword_value("--__--")

    def test_non_string(self):
        with pytest.raises(InvalidInputError, match="got NoneType"):
            normalize_category(None)

    def test_error_carries_role(self):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_token(" ", "category")
        assert exc_info.value.role == "category"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_keyword_value("")


# ===========================================================================
# D. Idempotence
# ===========================================================================

class TestIdempotence:

    @pytest.mark.parametrize("raw", [
        "userRole", "user-role", "  Admin User ", "STATE_CHANGE",
        "version2Beta", "_x__y_", "oauth2client", "OAUTH2CLIENT",
        "s3bucket", "x2l",
    ])
    def test_fixed_point(self, raw):
        once = normalize_keyword_value(raw)
        assert normalize_keyword_value(once) == once
        assert normalize_category(once) == once
