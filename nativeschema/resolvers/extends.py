"""
Inherited prop groups (extends clauses).
"""

from nativeschema.ast_nodes import REFERENCE_TYPES, node_type, reference_name
from nativeschema.errors import UnsupportedTypeError

KNOWN_EXTENDS = {
    'ViewProps': 'ReactNativeCoreViewProps',
}


def extends_for_property(prop, types):
    """Extends descriptor for a spread/extended type reference, or None for plain members."""
    if node_type(prop) not in REFERENCE_TYPES:
        return None

    name = reference_name(prop)
    if name in types:
        return None

    known_type_name = KNOWN_EXTENDS.get(name)
    if known_type_name is None:
        raise UnsupportedTypeError(
            f'Unable to handle prop spread: {name}',
            node=prop,
            suggestion='Only ViewProps can be extended; declare other props in this file',
        )
    return {
        'type': 'ReactNativeBuiltInType',
        'knownTypeName': known_type_name,
    }


def get_extends_props(properties, types):
    """Descriptors for every known prop group the props type extends."""
    extends_props = []
    for prop in properties:
        extended = extends_for_property(prop, types)
        if extended is not None:
            extends_props.append(extended)
    return extends_props


def remove_known_extends(properties, types):
    """The properties that are not extends clauses."""
    return [prop for prop in properties if extends_for_property(prop, types) is None]
