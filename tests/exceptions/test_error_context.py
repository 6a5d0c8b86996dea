"""
Tests for error context and formatting system.

This module tests ErrorContext, ErrorLevel enum, and how structural errors
format messages based on error level (user vs developer).
"""

from recordtree.exceptions import (
    DocumentStructureError,
    ErrorContext,
    ErrorLevel,
    InvalidValueError,
    PropertyIsNotDefinedError,
    RecordsError,
    SchemaError,
    ValueParseError,
)


class TestErrorContext:
    """Tests for ErrorContext dataclass."""

    def test_create_minimal_context(self):
        """Test creating ErrorContext with minimal information."""
        ctx = ErrorContext(element_name="new")
        assert ctx.element_name == "new"
        assert ctx.attribute_name is None
        assert ctx.line is None

    def test_format_user_level_element(self):
        """Test USER level shows the element but no source location."""
        ctx = ErrorContext(
            element_name="new",
            line=12,
            document="books.xml",
            snippet='<new Title="x"/>',
        )
        formatted = ctx.format_location(ErrorLevel.USER)

        assert "<new>" in formatted
        assert "books.xml" not in formatted
        assert "12" not in formatted

    def test_format_user_level_attribute(self):
        """Test USER level names the offending attribute."""
        ctx = ErrorContext(element_name="set", attribute_name="Missing")
        formatted = ctx.format_location(ErrorLevel.USER)

        assert "<set Missing=...>" in formatted

    def test_format_developer_level(self):
        """Test DEVELOPER level adds document, line and snippet."""
        ctx = ErrorContext(
            element_name="new",
            line=12,
            document="books.xml",
            snippet='<new Title="x"/>',
        )
        formatted = ctx.format_location(ErrorLevel.DEVELOPER)

        assert "books.xml:12" in formatted
        assert '<new Title="x"/>' in formatted

    def test_format_developer_level_without_document(self):
        """Test DEVELOPER level falls back to the bare line number."""
        ctx = ErrorContext(element_name="new", line=7)
        formatted = ctx.format_location(ErrorLevel.DEVELOPER)

        assert "line 7" in formatted

    def test_format_without_optional_fields(self):
        """Test formatting an empty context does not crash."""
        assert ErrorContext().format_location(ErrorLevel.DEVELOPER) == ""


class TestExceptionHierarchy:
    """Tests for the exception taxonomy and message building."""

    def test_structural_error_message_includes_location(self):
        """Test structural errors append the formatted location."""
        error = PropertyIsNotDefinedError(
            "Missing", context=ErrorContext(element_name="new", attribute_name="Missing")
        )

        assert str(error).startswith("Property 'Missing' is not defined")
        assert "<new Missing=...>" in str(error)
        assert error.property_name == "Missing"

    def test_structural_error_without_context(self):
        """Test structural errors work without any context."""
        error = PropertyIsNotDefinedError("Missing")
        assert str(error) == "Property 'Missing' is not defined"

    def test_value_parse_error_wraps_invalid_value(self):
        """Test ValueParseError keeps the resolver error."""
        cause = InvalidValueError("$(x)", "variable 'x' is not defined", 0)
        error = ValueParseError(cause)

        assert error.error is cause
        assert "variable 'x' is not defined" in str(error)

    def test_all_errors_share_base(self):
        """Test every error derives from RecordsError."""
        assert issubclass(DocumentStructureError, RecordsError)
        assert issubclass(SchemaError, RecordsError)
        assert issubclass(InvalidValueError, RecordsError)
        assert not issubclass(SchemaError, ValueError)
