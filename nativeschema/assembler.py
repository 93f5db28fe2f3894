"""
Component schema assembly.

Combines the located component config with the type resolution
collaborators into one ComponentSchema. Properties are resolved first since
extends-clauses, props and events are all derived from the same list.
"""

from nativeschema.ast_nodes import interface_members, node_type, property_key_name
from nativeschema.errors import MalformedInputError, ShapeMismatchError
from nativeschema.locator import ComponentConfigLocator
from nativeschema.models import ComponentSchema
from nativeschema.resolvers import DefaultTypeResolver


def get_command_properties(command_type_name, types, command_options):
    """Members of the commands interface, checked against supportedCommands."""
    if command_type_name is None:
        return []

    missing_message = (
        f'Failed to find type definition for "{command_type_name}", '
        'please check that you have a valid codegen typescript file'
    )
    type_alias = types.get(command_type_name)
    if type_alias is None:
        raise MalformedInputError(missing_message)

    if node_type(type_alias) != 'TSInterfaceDeclaration':
        raise ShapeMismatchError(
            f'The type argument for codegenNativeCommands must be an interface, received {node_type(type_alias)}',
            node=type_alias,
        )

    properties = interface_members(type_alias)
    if properties is None:
        raise MalformedInputError(missing_message, node=type_alias)

    typescript_property_names = [name for name in map(property_key_name, properties) if name]

    if command_options is None or command_options.supported_commands is None:
        raise ShapeMismatchError(
            'codegenNativeCommands must be given an options object with supportedCommands array',
            node=type_alias,
        )

    supported_commands = command_options.supported_commands
    if (
        len(supported_commands) != len(typescript_property_names)
        or set(supported_commands) != set(typescript_property_names)
    ):
        raise ShapeMismatchError(
            'codegenNativeCommands expected the same supportedCommands specified in the '
            f'{command_type_name} interface: {", ".join(typescript_property_names)}',
            node=type_alias,
            suggestion=f'supportedCommands currently lists: {", ".join(supported_commands)}',
        )

    return properties


class SchemaAssembler:
    """Builds a ComponentSchema from a parsed component file."""

    def __init__(self, resolver=None, locator=None):
        """
        Args:
            resolver: TypeResolver used for every facet. Defaults to DefaultTypeResolver.
            locator: Object with a `locate(ast)` method. Defaults to ComponentConfigLocator.
        """
        self.resolver = resolver if resolver is not None else DefaultTypeResolver()
        self.locator = locator if locator is not None else ComponentConfigLocator()

    def assemble(self, ast):
        resolver = self.resolver
        config = self.locator.locate(ast)

        types = resolver.get_types(ast)

        prop_properties = resolver.get_properties(config.props_type_name, types)
        command_options = resolver.get_command_options(config.command_options_expression)

        command_properties = get_command_properties(
            config.command_type_name,
            types,
            command_options,
        )

        extends_props = resolver.get_extends_props(prop_properties, types)
        options = resolver.get_options(config.options_expression)

        non_extends_props = resolver.remove_known_extends(prop_properties, types)
        props = resolver.get_props(non_extends_props, types)
        events = resolver.get_events(prop_properties, types)
        commands = resolver.get_commands(command_properties, types)

        state = None
        if config.state_type_name:
            state_properties = resolver.get_properties(config.state_type_name, types)
            state = resolver.get_state(state_properties, types)

        return ComponentSchema(
            filename=config.component_name,
            component_name=config.component_name,
            options=options,
            extends_props=extends_props,
            events=events,
            props=props,
            commands=commands,
            state=state,
        )


def build_component_schema(ast, resolver=None):
    """Assemble the schema of one parsed component file."""
    return SchemaAssembler(resolver=resolver).assemble(ast)
