"""
Error types for native component schema extraction.
"""


class CodegenSchemaError(Exception):
    """Base error for schema extraction with source location and hints."""
    def __init__(self, message, node=None, filename=None, suggestion=None):
        self.message = message
        self.node = node
        self.filename = filename
        self.line_number, self.column = get_node_location(node)
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with location and suggestion."""
        lines = ["\n❌ Schema Error"]
        if self.filename:
            lines.append(f" in {self.filename}")
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column is not None:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)

    def with_filename(self, filename):
        """Return a copy of this error that reports the given file name."""
        return type(self)(
            self.message,
            node=self.node,
            filename=filename,
            suggestion=self.suggestion,
        )


class StructuralError(CodegenSchemaError):
    """The file does not declare exactly one component, command set or state."""


class ShapeMismatchError(CodegenSchemaError):
    """A matched declaration has the wrong shape."""


class MalformedInputError(CodegenSchemaError):
    """An expected type definition is missing or unreadable."""
    def __init__(self, message, node=None, filename=None, suggestion=None):
        if suggestion is None:
            suggestion = "Check that the file is a valid codegen TypeScript file"
        super().__init__(message, node=node, filename=filename, suggestion=suggestion)


class UnsupportedTypeError(CodegenSchemaError):
    """A type annotation has no schema equivalent."""


def get_node_location(node):
    """Return the (line, column) where an AST node starts, or (None, None)."""
    if not isinstance(node, dict):
        return None, None
    start = (node.get('loc') or {}).get('start') or {}
    return start.get('line'), start.get('column')
