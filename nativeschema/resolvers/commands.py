"""
Component commands.

Each member of the commands interface is a function whose first parameter
is the component ref, for example:

    interface NativeCommands {
      readonly scrollTo: (viewRef: React.ElementRef<ComponentType>, y: Int32) => void;
    }
"""

from nativeschema.ast_nodes import (
    member_annotation,
    node_type,
    property_key_name,
    qualified_name,
    type_arguments,
)
from nativeschema.errors import ShapeMismatchError, UnsupportedTypeError
from nativeschema.resolvers.annotations import build_type_annotation, unwrap_nullable

REF_TYPES = ('React.ElementRef', 'ElementRef')

PARAM_TYPES = (
    'BooleanTypeAnnotation',
    'StringTypeAnnotation',
    'Int32TypeAnnotation',
    'DoubleTypeAnnotation',
    'FloatTypeAnnotation',
)


def _signature(member, name):
    """(parameters, return annotation) of a method or function-typed property."""
    kind = node_type(member)
    if kind == 'TSMethodSignature':
        function = member
    elif kind == 'TSPropertySignature':
        function, _ = unwrap_nullable(member_annotation(member))
    else:
        function = None
    if node_type(function) not in ('TSMethodSignature', 'TSFunctionType'):
        raise UnsupportedTypeError(f'Command "{name}" must be a function', node=member)

    params = function.get('parameters')
    if params is None:
        params = function.get('params') or []
    returns = member_annotation(function) if 'typeAnnotation' in function else function.get('returnType')
    if node_type(returns) == 'TSTypeAnnotation':
        returns = returns.get('typeAnnotation')
    return params, returns


def _param_annotation(param):
    annotation = param.get('typeAnnotation')
    if node_type(annotation) == 'TSTypeAnnotation':
        annotation = annotation.get('typeAnnotation')
    return annotation


def _is_ref_param(param):
    annotation = _param_annotation(param)
    return (
        node_type(annotation) == 'TSTypeReference'
        and qualified_name(annotation.get('typeName')) in REF_TYPES
        and len(type_arguments(annotation)) == 1
    )


def build_command_param(param, types, command_name):
    param_name = param.get('name')
    annotation = build_type_annotation(_param_annotation(param), types, param_name)

    checked = annotation
    if annotation['type'] == 'ArrayTypeAnnotation':
        checked = annotation['elementType']
    if checked['type'] not in PARAM_TYPES:
        raise UnsupportedTypeError(
            f'Unsupported param type for method "{command_name}", param "{param_name}". Found {checked["type"]}',
            node=param,
        )

    return {
        'name': param_name,
        'optional': bool(param.get('optional')),
        'typeAnnotation': annotation,
    }


def build_command_schema(member, types):
    name = property_key_name(member)
    params, returns = _signature(member, name)

    if not params or not _is_ref_param(params[0]):
        raise ShapeMismatchError(
            f'The first argument of method {name} must be of type React.ElementRef<>',
            node=member,
        )
    if node_type(returns) != 'TSVoidKeyword':
        raise UnsupportedTypeError(
            f'Command "{name}" must return void, found {node_type(returns)}',
            node=member,
        )

    return {
        'name': name,
        'optional': False,
        'typeAnnotation': {
            'type': 'FunctionTypeAnnotation',
            'params': [build_command_param(p, types, name) for p in params[1:]],
            'returnTypeAnnotation': {'type': 'VoidTypeAnnotation'},
        },
    }


def get_commands(properties, types):
    """Function schema for each validated command member."""
    return [build_command_schema(member, types) for member in properties]
