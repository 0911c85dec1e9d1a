import pytest

from bankpull.models import Account, AccountKind, KIND_PATTERNS, RetrievalResult, classify


class TestClassify:
    """Tests for the account type classification table."""

    @pytest.mark.parametrize(
        "raw_type",
        ["cc", "CC", "Cc", "credit", "Credit Card", "CREDIT_CARD", "visa cc"],
    )
    def test_credit_card_patterns(self, raw_type):
        assert classify(raw_type) == AccountKind.CREDIT_CARD

    @pytest.mark.parametrize("raw_type", ["checking", "Checking", "CHECKINGS", "chequing"])
    def test_checking_patterns(self, raw_type):
        assert classify(raw_type) == AccountKind.CHECKING

    @pytest.mark.parametrize("raw_type", ["savings", "Saving", "Online SAVING"])
    def test_savings_patterns(self, raw_type):
        assert classify(raw_type) == AccountKind.SAVINGS

    def test_case_insensitive_and_idempotent(self):
        assert classify("CC") == classify("cc") == classify("Credit Card")
        assert classify(classify("cc").value) == AccountKind.CREDIT_CARD

    def test_credit_card_wins_over_checking(self):
        """Credit card patterns are checked first."""
        assert classify("credit checking") == AccountKind.CREDIT_CARD

    def test_checking_wins_over_savings(self):
        assert classify("checking and savings") == AccountKind.CHECKING

    @pytest.mark.parametrize("raw_type", ["brokerage", "", "loan", None])
    def test_unmatched_is_unclassified(self, raw_type):
        """Unknown types fall back to UNCLASSIFIED instead of failing."""
        assert classify(raw_type) == AccountKind.UNCLASSIFIED

    def test_every_kind_but_unclassified_has_patterns(self):
        kinds = {kind for kind, _ in KIND_PATTERNS}
        assert kinds == set(AccountKind) - {AccountKind.UNCLASSIFIED}

    def test_kind_values_used_in_file_names(self):
        assert AccountKind.CREDIT_CARD.value == "credit_card"
        assert AccountKind.CHECKING.value == "checkings"
        assert AccountKind.SAVINGS.value == "savings"


class TestAccount:
    """Tests for the Account value type."""

    def test_from_config_classifies_and_stringifies_id(self):
        account = Account.from_config("cc", 1234)

        assert account.kind == AccountKind.CREDIT_CARD
        assert account.id == "1234"
        assert account.is_credit_card

    def test_accounts_are_immutable(self):
        account = Account.from_config("savings", "99")

        with pytest.raises(AttributeError):
            account.id = "100"

    def test_equal_accounts_compare_equal(self):
        assert Account.from_config("checking", "1") == Account(AccountKind.CHECKING, "1")


class TestRetrievalResult:
    def test_ok_without_error(self, tmp_path):
        result = RetrievalResult("chase", Account.from_config("cc", "1"), destination=tmp_path / "x.qfx")
        assert result.ok

    def test_not_ok_with_error(self):
        result = RetrievalResult("chase", Account.from_config("cc", "1"), error="boom")
        assert not result.ok
