"""
TypeScript type annotations to schema type annotations.

Props, state, event payloads and command parameters all go through
build_type_annotation; each caller then restricts the result to what its
facet supports.
"""

from nativeschema.ast_nodes import (
    literal_value,
    member_annotation,
    node_type,
    property_key_name,
    reference_name,
    type_arguments,
)
from nativeschema.errors import ShapeMismatchError, UnsupportedTypeError
from nativeschema.resolvers.properties import (
    flatten_properties,
    get_properties,
    type_members,
    unwrap_readonly,
)

NULLABLE_KEYWORDS = ('TSNullKeyword', 'TSUndefinedKeyword')

KEYWORD_TYPES = {
    'TSBooleanKeyword': 'BooleanTypeAnnotation',
    'TSStringKeyword': 'StringTypeAnnotation',
}

NUMERIC_TYPES = {
    'Int32': 'Int32TypeAnnotation',
    'Double': 'DoubleTypeAnnotation',
    'Float': 'FloatTypeAnnotation',
}

RESERVED_TYPES = {
    'ColorValue': 'ColorPrimitive',
    'ProcessedColorValue': 'ColorPrimitive',
    'ImageSource': 'ImageSourcePrimitive',
    'PointValue': 'PointPrimitive',
    'EdgeInsetsValue': 'EdgeInsetsPrimitive',
    'ImageRequest': 'ImageRequestPrimitive',
    'DimensionValue': 'DimensionPrimitive',
}

MIXED_TYPES = ('UnsafeMixed',)
ARRAY_WRAPPERS = ('ReadonlyArray', 'Array')
WITH_DEFAULT = 'WithDefault'

NO_DEFAULT = object()


def unwrap_nullable(annotation):
    """Strip `| null` and `| undefined` from a union.

    Returns (annotation, nullable).
    """
    while node_type(annotation) == 'TSParenthesizedType':
        annotation = annotation.get('typeAnnotation')
    if node_type(annotation) != 'TSUnionType':
        return annotation, False

    members = annotation.get('types') or []
    remaining = [t for t in members if node_type(t) not in NULLABLE_KEYWORDS]
    if len(remaining) == len(members):
        return annotation, False
    if len(remaining) == 1:
        return remaining[0], True
    return dict(annotation, types=remaining), True


def type_literal_value(annotation):
    """Value of a literal type such as `'auto'`, `3` or `null`, as (found, value)."""
    kind = node_type(annotation)
    if kind == 'TSNullKeyword':
        return True, None
    if kind == 'TSLiteralType':
        return literal_value(annotation.get('literal'))
    return False, None


def unwrap_with_default(annotation, name):
    """Split `WithDefault<T, D>` into (T, D); other annotations give (annotation, NO_DEFAULT)."""
    if node_type(annotation) != 'TSTypeReference' or reference_name(annotation) != WITH_DEFAULT:
        return annotation, NO_DEFAULT

    params = type_arguments(annotation)
    if len(params) != 2:
        raise ShapeMismatchError(f'WithDefault for "{name}" must have a type and a default value', node=annotation)
    found, default = type_literal_value(params[1])
    if not found:
        raise ShapeMismatchError(f'The default value of "{name}" must be a literal', node=params[1])
    return params[0], default


def resolve_alias(annotation, types):
    """Follow local type aliases and Readonly wrappers to the underlying annotation.

    Returns (annotation, names of the aliases followed).
    """
    aliases = []
    while True:
        annotation = unwrap_readonly(annotation)
        name = reference_name(annotation) if node_type(annotation) == 'TSTypeReference' else None
        declaration = types.get(name) if name else None
        if node_type(declaration) != 'TSTypeAliasDeclaration' or name in aliases:
            return annotation, aliases
        aliases.append(name)
        annotation = declaration.get('typeAnnotation')


def _literal_union_options(annotation):
    """Options of a union of literal types; None if any member is not a literal."""
    members = annotation.get('types') if node_type(annotation) == 'TSUnionType' else [annotation]
    options = []
    for member in members or []:
        found, value = type_literal_value(member)
        if not found or value is None:
            return None
        options.append(value)
    return options


def _enum_annotation(options, name, annotation):
    if all(isinstance(o, str) for o in options):
        return {'type': 'StringEnumTypeAnnotation', 'options': options}
    if all(isinstance(o, int) and not isinstance(o, bool) for o in options):
        return {'type': 'Int32EnumTypeAnnotation', 'options': options}
    raise UnsupportedTypeError(
        f'Unsupported union for "{name}": enums must be all string or all integer literals',
        node=annotation,
    )


def _scalar(type_name, with_defaults, default, fallback):
    result = {'type': type_name}
    if with_defaults:
        result['default'] = fallback if default is NO_DEFAULT else default
    return result


def build_type_annotation(annotation, types, name, with_defaults=False, optional=False,
                          default=NO_DEFAULT, element=False, visiting=()):
    """Schema type annotation for one member.

    Args:
        annotation: The TypeScript type node.
        types: TypeDeclarationMap of the file.
        name: Member name, for error messages.
        with_defaults: Attach `default` to scalars and enums (props and state).
        optional: Whether the member is optional; affects the boolean default.
        default: Value from WithDefault<T, D>, or NO_DEFAULT.
        element: True for array elements, which never carry scalar defaults.
        visiting: Names of the local object types enclosing this member.
    """
    annotation, aliases = resolve_alias(annotation, types)
    for alias in aliases:
        if alias in visiting:
            raise _recursive_type(alias, name, annotation)
    visiting = visiting + tuple(aliases)
    kind = node_type(annotation)
    scalar_defaults = with_defaults and not element

    if kind in KEYWORD_TYPES:
        type_name = KEYWORD_TYPES[kind]
        fallback = None
        if type_name == 'BooleanTypeAnnotation' and not optional:
            fallback = False
        return _scalar(type_name, scalar_defaults, default, fallback)

    if kind == 'TSNumberKeyword':
        raise UnsupportedTypeError(
            f'Cannot use "number" for "{name}"',
            node=annotation,
            suggestion='Use Int32, Double or Float from CodegenTypes',
        )

    if kind == 'TSArrayType':
        return _array_annotation(annotation.get('elementType'), types, name, with_defaults, default, visiting)

    if kind in ('TSTypeLiteral', 'TSIntersectionType'):
        members = flatten_properties(type_members(annotation, name), types, visiting)
        return _object_annotation(members, types, with_defaults, visiting)

    if kind in ('TSUnionType', 'TSLiteralType'):
        options = _literal_union_options(annotation)
        if options is None:
            raise UnsupportedTypeError(f'Unsupported union type for "{name}"', node=annotation)
        result = _enum_annotation(options, name, annotation)
        if default is not NO_DEFAULT:
            if default not in options:
                raise ShapeMismatchError(
                    f'Default value {default!r} of "{name}" is not one of {options}',
                    node=annotation,
                )
            result['default'] = default
        elif scalar_defaults:
            raise ShapeMismatchError(
                f'A default enum value is required for "{name}"',
                node=annotation,
                suggestion="Wrap the union in WithDefault<..., 'value'>",
            )
        return result

    if kind == 'TSTypeReference':
        ref = reference_name(annotation)
        if ref in NUMERIC_TYPES:
            return _scalar(NUMERIC_TYPES[ref], scalar_defaults, default, 0)
        if ref in RESERVED_TYPES:
            return {'type': 'ReservedPropTypeAnnotation', 'name': RESERVED_TYPES[ref]}
        if ref in MIXED_TYPES:
            return {'type': 'MixedTypeAnnotation'}
        if ref in ARRAY_WRAPPERS:
            params = type_arguments(annotation)
            if len(params) != 1:
                raise ShapeMismatchError(f'{ref} for "{name}" must have exactly one type argument', node=annotation)
            return _array_annotation(params[0], types, name, with_defaults, default, visiting)
        if node_type(types.get(ref)) == 'TSInterfaceDeclaration':
            if ref in visiting:
                raise _recursive_type(ref, name, annotation)
            return _object_annotation(get_properties(ref, types), types, with_defaults, visiting + (ref,))
        raise UnsupportedTypeError(f'Unsupported type {ref} for "{name}"', node=annotation)

    raise UnsupportedTypeError(f'Unsupported type annotation {kind} for "{name}"', node=annotation)


def _recursive_type(type_name, name, node):
    return UnsupportedTypeError(
        f'Recursive type "{type_name}" used by "{name}" cannot be described in the schema',
        node=node,
    )


def _array_annotation(element_annotation, types, name, with_defaults, default, visiting):
    element, nullable = unwrap_nullable(element_annotation)
    element_type = build_type_annotation(
        element, types, name,
        with_defaults=with_defaults,
        optional=nullable,
        default=default,
        element=True,
        visiting=visiting,
    )
    return {'type': 'ArrayTypeAnnotation', 'elementType': element_type}


def _object_annotation(members, types, with_defaults, visiting):
    properties = [build_object_property(member, types, with_defaults, visiting) for member in members]
    return {'type': 'ObjectTypeAnnotation', 'properties': properties}


def build_object_property(member, types, with_defaults, visiting=()):
    """Schema entry `{name, optional, typeAnnotation}` for one property signature."""
    name = property_key_name(member)
    if node_type(member) != 'TSPropertySignature' or name is None:
        raise UnsupportedTypeError(
            f'Unsupported member {node_type(member)}; only named property signatures are allowed',
            node=member,
        )

    annotation, nullable = unwrap_nullable(member_annotation(member))
    default = NO_DEFAULT
    if with_defaults:
        annotation, default = unwrap_with_default(annotation, name)
    optional = bool(member.get('optional')) or nullable or default is not NO_DEFAULT

    return {
        'name': name,
        'optional': optional,
        'typeAnnotation': build_type_annotation(
            annotation, types, name,
            with_defaults=with_defaults,
            optional=optional,
            default=default,
            visiting=visiting,
        ),
    }
