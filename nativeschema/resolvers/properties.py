"""
Property extraction for interfaces and object type aliases.
"""

from nativeschema.ast_nodes import (
    REFERENCE_TYPES,
    interface_members,
    node_type,
    reference_name,
    type_arguments,
)
from nativeschema.errors import MalformedInputError, UnsupportedTypeError

READONLY_WRAPPERS = ('Readonly', '$ReadOnly')


def unwrap_readonly(annotation):
    """Strip `Readonly<T>`, `$ReadOnly<T>`, `readonly T` and parentheses."""
    while True:
        kind = node_type(annotation)
        if kind == 'TSParenthesizedType':
            annotation = annotation.get('typeAnnotation')
        elif kind == 'TSTypeOperator' and annotation.get('operator') == 'readonly':
            annotation = annotation.get('typeAnnotation')
        elif kind == 'TSTypeReference' and reference_name(annotation) in READONLY_WRAPPERS:
            params = type_arguments(annotation)
            if len(params) != 1:
                return annotation
            annotation = params[0]
        else:
            return annotation


def type_members(annotation, type_name):
    """Members of an object-like type annotation, before flattening."""
    annotation = unwrap_readonly(annotation)
    kind = node_type(annotation)
    if kind == 'TSTypeLiteral':
        return list(annotation.get('members') or [])
    if kind == 'TSIntersectionType':
        members = []
        for part in annotation.get('types') or []:
            members.extend(type_members(part, type_name))
        return members
    if kind == 'TSTypeReference':
        # Resolved (or kept as an extends clause) during flattening
        return [annotation]
    raise MalformedInputError(
        f'Failed to find type definition for "{type_name}", please check that you have a valid codegen typescript file',
        node=annotation,
    )


def declaration_members(declaration, type_name):
    """Members of an interface (heritage clauses first) or type alias."""
    kind = node_type(declaration)
    if kind == 'TSInterfaceDeclaration':
        members = interface_members(declaration)
        if members is None:
            raise MalformedInputError(
                f'Failed to find interface definition for "{type_name}", please check that you have a valid codegen typescript file',
                node=declaration,
            )
        return list(declaration.get('extends') or []) + members
    if kind == 'TSTypeAliasDeclaration':
        return type_members(declaration.get('typeAnnotation'), type_name)
    raise MalformedInputError(
        f'Failed to find type definition for "{type_name}", please check that you have a valid codegen typescript file',
        node=declaration,
    )


def flatten_properties(members, types, visiting=()):
    """Inline members of locally declared types that are spread or extended.

    References to types not declared in the file (such as ViewProps) are left
    in place for the extends pass.
    """
    properties = []
    for member in members:
        kind = node_type(member)
        if kind == 'TSPropertySignature':
            properties.append(member)
        elif kind in REFERENCE_TYPES:
            name = reference_name(member)
            if name in types:
                if name in visiting:
                    raise UnsupportedTypeError(f'Recursive type "{name}" cannot be used as props', node=member)
                properties.extend(_properties_of(name, types, visiting + (name,)))
            else:
                properties.append(member)
        else:
            raise UnsupportedTypeError(
                f'Unsupported member type {kind} in props; only property signatures are allowed',
                node=member,
            )
    return properties


def _properties_of(type_name, types, visiting):
    declaration = types.get(type_name)
    if declaration is None:
        raise MalformedInputError(
            f'Failed to find type definition for "{type_name}", please check that you have a valid codegen typescript file'
        )
    return flatten_properties(declaration_members(declaration, type_name), types, visiting)


def get_properties(type_name, types):
    """Ordered property list of a locally declared props or state type."""
    return _properties_of(type_name, types, (type_name,))
