"""Unit tests for status label normalization."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis.strategies import characters, from_regex, text

from displayfmt.core.formatting import get_status_class


@pytest.mark.core
@pytest.mark.tra("Domain.Format.StatusClass")
@pytest.mark.tier(0)
class TestGetStatusClass:
    """Tests for get_status_class."""

    def test_multi_word_label_is_hyphenated(self) -> None:
        """'In Progress' maps to 'in-progress'."""
        assert get_status_class("In Progress") == "in-progress"

    def test_single_word_label_is_lowercased(self) -> None:
        """'Done' maps to 'done'."""
        assert get_status_class("Done") == "done"

    def test_surrounding_whitespace_becomes_hyphens(self) -> None:
        """Leading and trailing whitespace runs are not trimmed."""
        assert get_status_class("  Needs   Review ") == "-needs-review-"

    def test_mixed_whitespace_run_collapses_to_one_hyphen(self) -> None:
        """Tabs and newlines count as whitespace."""
        assert get_status_class("On\t \nHold") == "on-hold"

    def test_existing_hyphens_are_kept(self) -> None:
        """Hyphens in the label are not touched."""
        assert get_status_class("Follow-up Needed") == "follow-up-needed"

    @pytest.mark.parametrize("status", ["", None])
    def test_falsy_input_returns_empty_string(self, status: str | None) -> None:
        """Empty string and None short-circuit to ''."""
        assert get_status_class(status) == ""

    def test_whitespace_only_label_becomes_single_hyphen(self) -> None:
        """A non-empty label of only whitespace is one run."""
        assert get_status_class("   ") == "-"


@pytest.mark.core
@pytest.mark.tra("Domain.Format.StatusClass")
@pytest.mark.tier(1)
class TestGetStatusClassProperties:
    """Property tests for get_status_class."""

    @given(token=from_regex(r"[a-z0-9]+(-[a-z0-9]+)*", fullmatch=True))
    def test_normalized_token_is_fixed_point(self, token: str) -> None:
        """Already-normalized tokens come back unchanged."""
        assert get_status_class(token) == token

    @given(label=text(alphabet=characters(codec="ascii")))
    def test_normalizing_twice_equals_once(self, label: str) -> None:
        """A second pass is a no-op."""
        once = get_status_class(label)
        assert get_status_class(once) == once

    @given(label=text(alphabet=characters(codec="ascii"), min_size=1))
    def test_output_has_no_whitespace_or_uppercase(self, label: str) -> None:
        """Tokens never contain whitespace or uppercase letters."""
        token = get_status_class(label)
        assert not any(ch.isspace() for ch in token)
        assert token == token.lower()
