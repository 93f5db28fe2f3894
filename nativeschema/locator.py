"""
Component config locator.

Scans the top-level statements of a parsed component file for the single
`codegenNativeComponent` default export, the optional
`codegenNativeCommands` named export and the optional NativeState type.

Searching and validating are kept apart: the probe_* functions only answer
"is this the statement we want" and never raise, while validate_* functions
run after a match and raise on anything malformed.
"""

from nativeschema.ast_nodes import (
    call_arguments,
    callee_name,
    declaration_name,
    identifier_name,
    literal_value,
    node_type,
    program_body,
    type_arguments,
    unwrap_type_cast,
)
from nativeschema.errors import ShapeMismatchError, StructuralError
from nativeschema.models import ComponentConfig

COMPONENT_FUNCTION = 'codegenNativeComponent'
COMMANDS_FUNCTION = 'codegenNativeCommands'
STATE_MARKER = 'NativeState'


def probe_component_call(statement):
    """Match `export default codegenNativeComponent<Props>('Name', options?)`.

    Returns a dict of the extracted fields, or None if the statement is not
    a component declaration.
    """
    if node_type(statement) != 'ExportDefaultDeclaration':
        return None

    # The call may be wrapped in `as HostComponent<Props>`
    call = unwrap_type_cast(statement.get('declaration'))
    if callee_name(call) != COMPONENT_FUNCTION:
        return None

    type_params = type_arguments(call)
    args = call_arguments(call)
    if not type_params or not args:
        return None

    props_type = type_params[0] if isinstance(type_params[0], dict) else {}
    props_type_name = identifier_name(props_type.get('typeName'))
    found, component_name = literal_value(args[0])
    if props_type_name is None or not found or not isinstance(component_name, str):
        return None

    config = {
        'props_type_name': props_type_name,
        'component_name': component_name,
    }
    if len(args) > 1:
        config['options_expression'] = args[1]
    return config


def probe_commands_call(statement):
    """Return the `codegenNativeCommands(...)` call initializing a named export, or None."""
    if node_type(statement) != 'ExportNamedDeclaration':
        return None
    declaration = statement.get('declaration')
    if node_type(declaration) != 'VariableDeclaration':
        return None
    declarators = declaration.get('declarations') or []
    if not declarators or not isinstance(declarators[0], dict):
        return None
    call = declarators[0].get('init')
    if callee_name(call) != COMMANDS_FUNCTION:
        return None
    return call


def validate_commands_call(call):
    """Check a matched commands call and return (command type name, options expression)."""
    args = call_arguments(call)
    if len(args) != 1:
        raise ShapeMismatchError(
            'codegenNativeCommands must be passed options including the supported commands',
            node=call,
            suggestion="Pass an object like {supportedCommands: ['focus', 'blur']}",
        )

    type_params = type_arguments(call)
    type_param = type_params[0] if len(type_params) == 1 else None
    if node_type(type_param) != 'TSTypeReference':
        raise ShapeMismatchError(
            "codegenNativeCommands doesn't support inline definitions. Specify a file local type alias",
            node=call,
        )

    return identifier_name(type_param.get('typeName')), args[0]


def find_state_type_names(body):
    """All NativeState candidates: exported declarations first, then local interfaces.

    A declaration matching both scans is listed twice.
    """
    exported = []
    for statement in body:
        if node_type(statement) != 'ExportNamedDeclaration':
            continue
        name = declaration_name(statement.get('declaration'))
        if name and STATE_MARKER in name:
            exported.append(name)

    unexported = []
    for statement in body:
        if node_type(statement) != 'TSInterfaceDeclaration':
            continue
        name = declaration_name(statement)
        if name and STATE_MARKER in name:
            unexported.append(name)

    return exported + unexported


class ComponentConfigLocator:
    """Finds the component, commands and state declarations of one file."""

    def locate(self, ast):
        """Build the ComponentConfig for a parsed file.

        Raises:
            StructuralError: If the file does not hold exactly one component,
                calls codegenNativeCommands more than once, or declares more
                than one NativeState.
            ShapeMismatchError: If the codegenNativeCommands call is malformed.
        """
        body = program_body(ast)

        found_configs = [c for c in map(probe_component_call, body) if c is not None]
        if not found_configs:
            raise StructuralError(
                'Could not find component config for native component',
                suggestion="Add `export default codegenNativeComponent<NativeProps>('MyComponent');`",
            )
        if len(found_configs) > 1:
            raise StructuralError('Only one component is supported per file')
        found_config = found_configs[0]

        commands = []
        for statement in body:
            call = probe_commands_call(statement)
            if call is not None:
                commands.append(validate_commands_call(call))
        if len(commands) > 1:
            raise StructuralError('codegenNativeCommands may only be called once in a file')

        state_type_names = find_state_type_names(body)
        if len(state_type_names) > 1:
            raise StructuralError(
                f"Found {len(state_type_names)} NativeStates for {found_config['component_name']}. "
                "Each component can have only 1 NativeState"
            )

        command_type_name, command_options_expression = commands[0] if commands else (None, None)
        return ComponentConfig(
            **found_config,
            state_type_name=state_type_names[0] if state_type_names else '',
            command_type_name=command_type_name,
            command_options_expression=command_options_expression,
        )


def find_component_config(ast):
    """Locate the component config of a parsed file."""
    return ComponentConfigLocator().locate(ast)
