"""
Unit tests for the message composer.

Tests verify link construction, name escaping and link placement.
"""

import pytest

from src.domain.composer import (
    SUBJECT,
    build_verification_link,
    compose,
    compose_text,
    escape_name,
)

LINK = "https://register.example.org/verify-email?token=T1"


class TestBuildVerificationLink:
    """Tests for build_verification_link()."""

    def test_link_uses_base_url_path_and_token(self) -> None:
        """Link is base URL + /verify-email + token query."""
        assert build_verification_link("https://register.example.org", "T1") == LINK

    def test_trailing_slash_on_base_url_tolerated(self) -> None:
        """A trailing slash does not produce a double slash."""
        assert build_verification_link("https://register.example.org/", "T1") == LINK

    @pytest.mark.parametrize(
        ("token", "encoded"),
        [
            ("a b", "a%20b"),
            ("a&b=c", "a%26b%3Dc"),
            ("a/b?c#d", "a%2Fb%3Fc%23d"),
            ("abc-_.!~*'()", "abc-_.!~*'()"),
            ("é", "%C3%A9"),
        ],
    )
    def test_token_is_percent_encoded(self, token: str, encoded: str) -> None:
        """Token is encoded like encodeURIComponent."""
        link = build_verification_link("https://x.org", token)
        assert link == f"https://x.org/verify-email?token={encoded}"


class TestEscapeName:
    """Tests for display name escaping."""

    def test_angle_brackets_replaced(self) -> None:
        """< and > become entities."""
        assert escape_name("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_plain_name_unchanged(self) -> None:
        """Names without markup pass through."""
        assert escape_name("Ada O'Neil & Co") == "Ada O'Neil & Co"


class TestCompose:
    """Tests for compose()."""

    def test_link_appears_as_href_and_plain_text(self) -> None:
        """Link appears once as the button target and once as fallback text."""
        html = compose("Ada", LINK)

        assert html.count(f'href="{LINK}"') == 1
        assert html.count(LINK) == 2

    def test_name_markup_is_escaped(self) -> None:
        """Markup in name is rendered as entities, never raw."""
        html = compose('<img src=x onerror="steal()">', LINK)

        assert "<img" not in html
        assert '&lt;img src=x onerror="steal()"&gt;' in html

    def test_greeting_contains_name(self) -> None:
        """Escaped name appears in the greeting."""
        html = compose("A<b>", LINK)
        assert "Dear <strong>A&lt;b&gt;</strong>," in html

    def test_compose_is_deterministic(self) -> None:
        """Same inputs render the same body."""
        assert compose("Ada", LINK) == compose("Ada", LINK)

    def test_html_document(self) -> None:
        """Output is a complete HTML document."""
        html = compose("Ada", LINK)
        assert html.startswith("<!DOCTYPE html>")
        assert html.rstrip().endswith("</html>")


class TestComposeText:
    """Tests for the plain-text alternative."""

    def test_text_contains_name_and_link(self) -> None:
        """Plain text greets by name and carries the link."""
        text = compose_text("Ada", LINK)
        assert text.startswith("Dear Ada,")
        assert LINK in text

    def test_subject_is_fixed(self) -> None:
        """Subject names the course."""
        assert "Verify Your Email" in SUBJECT
