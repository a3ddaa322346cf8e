"""
Tests for AttributeLocator.

Covers dialect patterns, pattern priority, empty values and the
multi-line recovery window.
"""

import pytest

from shrink_tailwind.analyzers import AttributeLocator
from shrink_tailwind.contracts import AttributeKind, QuoteStyle


# ============================================================================
# SINGLE LINE
# ============================================================================


class TestFindClassAttribute:
    """Tests for find_class_attribute on one line."""

    def test_plain_class_round_trip(self, locator):
        """Should report the value, kind, quote and exact span."""
        line = '<div class="flex p-4">'
        attr = locator.find_class_attribute(line)

        assert attr is not None
        assert attr.value == "flex p-4"
        assert attr.attribute_kind == AttributeKind.CLASS
        assert attr.quote_style == QuoteStyle.DOUBLE
        assert line[attr.value_start:attr.value_end] == "flex p-4"
        assert attr.full_match == 'class="flex p-4"'

    def test_single_quoted_class(self, locator):
        attr = locator.find_class_attribute("<div class='flex p-4'>")
        assert attr.value == "flex p-4"
        assert attr.quote_style == QuoteStyle.SINGLE

    def test_jsx_class_name(self, locator):
        """Should detect className as a JSX attribute."""
        attr = locator.find_class_attribute('<div className="flex items-center">')
        assert attr.value == "flex items-center"
        assert attr.attribute_kind == AttributeKind.CLASS_NAME
        assert attr.quote_style == QuoteStyle.DOUBLE

    def test_jsx_class_name_single_quotes(self, locator):
        attr = locator.find_class_attribute("<div className='flex gap-2'>")
        assert attr.value == "flex gap-2"
        assert attr.quote_style == QuoteStyle.SINGLE

    def test_jsx_template_literal(self, locator):
        """Should capture raw template literal contents."""
        line = "<div className={`flex ${active} p-4`}>"
        attr = locator.find_class_attribute(line)

        assert attr.value == "flex ${active} p-4"
        assert attr.attribute_kind == AttributeKind.CLASS_NAME
        assert attr.quote_style == QuoteStyle.BACKTICK
        assert line[attr.value_start:attr.value_end] == "flex ${active} p-4"

    def test_vue_string_binding(self, locator):
        """Should match :class only with a nested single-quoted string."""
        attr = locator.find_class_attribute("<div :class=\"'flex p-4'\">")
        assert attr.value == "flex p-4"
        assert attr.attribute_kind == AttributeKind.CLASS
        assert attr.quote_style == QuoteStyle.SINGLE

    def test_vue_expression_binding_not_supported(self, locator):
        assert locator.find_class_attribute('<div :class="{ active: isActive }">') is None

    def test_angular_binding(self, locator):
        attr = locator.find_class_attribute('<div [class]="flex p-4">')
        assert attr.value == "flex p-4"
        assert attr.quote_style == QuoteStyle.DOUBLE

    def test_class_name_has_priority_over_class(self, locator):
        """Pattern priority wins over position in the line."""
        attr = locator.find_class_attribute('<div class="a b" className="c d">')
        assert attr.value == "c d"
        assert attr.attribute_kind == AttributeKind.CLASS_NAME

    def test_value_is_trimmed_span_is_not(self, locator):
        line = '<div class="  flex p-4  ">'
        attr = locator.find_class_attribute(line)
        assert attr.value == "flex p-4"
        assert line[attr.value_start:attr.value_end] == "  flex p-4  "

    def test_empty_attribute_falls_through_to_next_pattern(self, locator):
        attr = locator.find_class_attribute("<div class=\"\" data-x='y' class='flex'>")
        assert attr.value == "flex"
        assert attr.quote_style == QuoteStyle.SINGLE

    @pytest.mark.parametrize(
        "line",
        [
            '<div class="">',
            '<div class="   ">',
            ".my-class { color: red }",
            "<p>no attribute here</p>",
            '<div myclass="flex">',
            "",
        ],
    )
    def test_not_found(self, locator, line):
        assert locator.find_class_attribute(line) is None


# ============================================================================
# MULTI-LINE RECOVERY
# ============================================================================


class TestFindClassAttributeAtPosition:
    """Tests for find_class_attribute_at_position."""

    def test_exact_line_match(self, locator):
        text = 'header\n<div class="flex p-4">'
        location = locator.find_class_attribute_at_position(text, 1)

        assert location.line_index == 1
        assert location.line_count == 1
        assert not location.is_multiline
        assert text[location.document_start:location.document_end] == "flex p-4"

    def test_wrapped_attribute_is_recovered(self, locator, wrapped_document):
        location = locator.find_class_attribute_at_position(wrapped_document, 1)

        assert location is not None
        assert location.parsed.value == "flex items-center p-4 bg-white"
        assert location.line_index == 0
        assert location.line_count == 3
        assert location.is_multiline

    def test_wrapped_attribute_document_span(self, locator, wrapped_document):
        """Document offsets should cover the value across the line break."""
        location = locator.find_class_attribute_at_position(wrapped_document, 1)

        span = wrapped_document[location.document_start:location.document_end]
        assert span == "flex items-center\n    p-4 bg-white"
        assert location.replace_in(wrapped_document, "card") == '<div\n  class="card"\n>'

    def test_cursor_below_attribute(self, locator, wrapped_document):
        location = locator.find_class_attribute_at_position(wrapped_document, 3)
        assert location.parsed.value == "flex items-center p-4 bg-white"
        assert location.line_index == 0

    def test_lookaround_limits_search(self):
        text = '<div class="flex p-4">\n' + "\n" * 3 + "<span>"
        assert AttributeLocator(lookaround=1).find_class_attribute_at_position(text, 4) is None
        assert AttributeLocator(lookaround=5).find_class_attribute_at_position(text, 4) is not None

    @pytest.mark.parametrize("line_index", [-1, 10, 100])
    def test_out_of_range_line(self, locator, line_index):
        assert locator.find_class_attribute_at_position("<p>text</p>", line_index) is None

    def test_empty_document(self, locator):
        assert locator.find_class_attribute_at_position("", 0) is None
