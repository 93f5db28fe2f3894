# Type resolution collaborators
"""
Type resolution for component files.

Each module turns AST fragments into one facet of the component schema:
- types: table of locally declared types
- properties: property lists of interfaces and object aliases
- extends: inherited prop groups such as ViewProps
- options: component and command option literals
- props, events, commands, states: typed schema entries

SchemaAssembler talks to these through a TypeResolver so tests can swap in
fakes.
"""

from abc import ABC, abstractmethod

from .commands import get_commands
from .events import get_events
from .extends import get_extends_props, remove_known_extends
from .options import get_command_options, get_options
from .properties import get_properties
from .props import get_props
from .states import get_state
from .types import get_types


class TypeResolver(ABC):
    """Interface of the collaborators used to assemble a component schema."""

    @abstractmethod
    def get_types(self, ast):
        pass

    @abstractmethod
    def get_properties(self, type_name, types):
        pass

    @abstractmethod
    def get_extends_props(self, properties, types):
        pass

    @abstractmethod
    def remove_known_extends(self, properties, types):
        pass

    @abstractmethod
    def get_options(self, options_expression):
        pass

    @abstractmethod
    def get_command_options(self, command_options_expression):
        pass

    @abstractmethod
    def get_props(self, properties, types):
        pass

    @abstractmethod
    def get_events(self, properties, types):
        pass

    @abstractmethod
    def get_commands(self, properties, types):
        pass

    @abstractmethod
    def get_state(self, properties, types):
        pass


class DefaultTypeResolver(TypeResolver):
    """Resolves TypeScript component files with the modules of this package."""

    def get_types(self, ast):
        return get_types(ast)

    def get_properties(self, type_name, types):
        return get_properties(type_name, types)

    def get_extends_props(self, properties, types):
        return get_extends_props(properties, types)

    def remove_known_extends(self, properties, types):
        return remove_known_extends(properties, types)

    def get_options(self, options_expression):
        return get_options(options_expression)

    def get_command_options(self, command_options_expression):
        return get_command_options(command_options_expression)

    def get_props(self, properties, types):
        return get_props(properties, types)

    def get_events(self, properties, types):
        return get_events(properties, types)

    def get_commands(self, properties, types):
        return get_commands(properties, types)

    def get_state(self, properties, types):
        return get_state(properties, types)


__all__ = [
    'TypeResolver',
    'DefaultTypeResolver',
    'get_types',
    'get_properties',
    'get_extends_props',
    'remove_known_extends',
    'get_options',
    'get_command_options',
    'get_props',
    'get_events',
    'get_commands',
    'get_state',
]
