"""
Unit tests for nativeschema/errors.py.
"""
import pytest

from nativeschema.errors import (
    CodegenSchemaError,
    MalformedInputError,
    ShapeMismatchError,
    get_node_location,
)


def located(line, column):
    return {'type': 'Identifier', 'name': 'x', 'loc': {'start': {'line': line, 'column': column}}}


class TestNodeLocation:
    """Tests for reading locations off AST nodes."""

    def test_location_from_loc(self):
        assert get_node_location(located(12, 4)) == (12, 4)

    def test_missing_location(self):
        assert get_node_location({'type': 'Identifier'}) == (None, None)
        assert get_node_location(None) == (None, None)
        assert get_node_location('not a node') == (None, None)


class TestErrorFormatting:
    """Tests for the rendered error message."""

    def test_message_only(self):
        error = CodegenSchemaError('Something broke')
        assert str(error) == '\n❌ Schema Error:\n   Something broke\n'

    def test_location_and_suggestion(self):
        error = ShapeMismatchError('Bad shape', node=located(3, 7), suggestion='Fix it')
        text = str(error)
        assert 'at line 3, column 7' in text
        assert '💡 Fix it' in text
        assert error.line_number == 3
        assert error.column == 7

    def test_with_filename_keeps_type_and_details(self):
        error = ShapeMismatchError('Bad shape', node=located(3, 7), suggestion='Fix it')
        renamed = error.with_filename('Foo.json')

        assert type(renamed) is ShapeMismatchError
        assert renamed.filename == 'Foo.json'
        assert renamed.suggestion == 'Fix it'
        assert ' in Foo.json at line 3' in str(renamed)

    def test_malformed_input_has_default_suggestion(self):
        error = MalformedInputError('Missing type')
        assert error.suggestion == 'Check that the file is a valid codegen TypeScript file'

    def test_malformed_input_keeps_explicit_suggestion(self):
        assert MalformedInputError('Missing type', suggestion='Declare it').suggestion == 'Declare it'

    def test_errors_are_catchable_as_base(self):
        with pytest.raises(CodegenSchemaError):
            raise MalformedInputError('Missing type')
