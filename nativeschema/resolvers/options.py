"""
Options objects passed to codegenNativeComponent and codegenNativeCommands.
"""

from nativeschema.ast_nodes import literal_value, node_type, property_key_name
from nativeschema.errors import ShapeMismatchError
from nativeschema.models import CommandOptions


def _object_properties(expression, error_message):
    if node_type(expression) != 'ObjectExpression':
        raise ShapeMismatchError(error_message, node=expression)
    properties = []
    for prop in expression.get('properties') or []:
        name = property_key_name(prop)
        if node_type(prop) not in ('ObjectProperty', 'Property') or name is None:
            raise ShapeMismatchError(error_message, node=prop)
        properties.append((name, prop.get('value')))
    return properties


def _element_values(array_expression):
    values = []
    for element in array_expression.get('elements') or []:
        found, value = literal_value(element)
        values.append(value if found else None)
    return values


def get_options(options_expression):
    """Plain dict for the component options literal, or None if none was passed."""
    if options_expression is None:
        return None

    error_message = 'Failed to parse codegen options, please check that they are object literals'
    options = {}
    for name, value in _object_properties(options_expression, error_message):
        if node_type(value) == 'ArrayExpression':
            options[name] = _element_values(value)
            continue
        found, literal = literal_value(value)
        if not found:
            raise ShapeMismatchError(error_message, node=value)
        options[name] = literal

    if options.get('paperComponentName') and options.get('paperComponentNameDeprecated'):
        raise ShapeMismatchError(
            'Failed to parse codegen options, cannot use both paperComponentName and paperComponentNameDeprecated',
            node=options_expression,
        )
    return options


def get_command_options(command_options_expression):
    """CommandOptions for the codegenNativeCommands argument, or None."""
    if command_options_expression is None:
        return None

    error_message = 'Failed to parse command options, please check that they are defined correctly'
    options = {}
    for name, value in _object_properties(command_options_expression, error_message):
        if node_type(value) != 'ArrayExpression':
            options[name] = []
            continue
        values = _element_values(value)
        if not all(isinstance(v, str) for v in values):
            raise ShapeMismatchError(error_message, node=value)
        options[name] = values
    return CommandOptions(**options)
