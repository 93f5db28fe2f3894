"""
Unit tests for nativeschema/resolvers/commands.py.
"""

import pytest

from ast_builders import (
    annotation,
    command,
    func_type,
    ident,
    kw,
    param,
    prop,
    ref,
    ref_param,
)
from nativeschema.errors import ShapeMismatchError, UnsupportedTypeError
from nativeschema.resolvers.commands import get_commands


class TestGetCommands:
    """Tests for command schema entries."""

    def test_command_without_params(self):
        assert get_commands([command('focus')], {}) == [{
            'name': 'focus',
            'optional': False,
            'typeAnnotation': {
                'type': 'FunctionTypeAnnotation',
                'params': [],
                'returnTypeAnnotation': {'type': 'VoidTypeAnnotation'},
            },
        }]

    def test_params_after_ref(self):
        """The ref parameter is dropped and the rest are typed."""
        member = command(
            'scrollTo',
            param('x', ref('Double')),
            param('animated', kw('Boolean')),
            param('label', kw('String'), optional=True),
            param('ids', ref('ReadonlyArray', kw('String'))),
        )
        [result] = get_commands([member], {})

        assert result['typeAnnotation']['params'] == [
            {'name': 'x', 'optional': False, 'typeAnnotation': {'type': 'DoubleTypeAnnotation'}},
            {'name': 'animated', 'optional': False, 'typeAnnotation': {'type': 'BooleanTypeAnnotation'}},
            {'name': 'label', 'optional': True, 'typeAnnotation': {'type': 'StringTypeAnnotation'}},
            {
                'name': 'ids',
                'optional': False,
                'typeAnnotation': {'type': 'ArrayTypeAnnotation', 'elementType': {'type': 'StringTypeAnnotation'}},
            },
        ]

    def test_method_signature(self):
        """`focus(viewRef: ElementRef<T>): void` is accepted as well."""
        member = {
            'type': 'TSMethodSignature',
            'key': ident('blur'),
            'parameters': [param('viewRef', ref('ElementRef', ref('T')))],
            'typeAnnotation': annotation(kw('Void')),
        }
        [result] = get_commands([member], {})
        assert result['name'] == 'blur'

    def test_babel8_field_names(self):
        """`params` and `returnType` are read when `parameters` is absent."""
        function = {
            'type': 'TSFunctionType',
            'params': [ref_param(), param('y', ref('Int32'))],
            'returnType': annotation(kw('Void')),
        }
        [result] = get_commands([prop('scroll', function)], {})
        assert result['typeAnnotation']['params'][0]['typeAnnotation'] == {'type': 'Int32TypeAnnotation'}

    def test_missing_ref_param_raises(self):
        member = prop('focus', func_type(param('x', ref('Int32'))))
        with pytest.raises(ShapeMismatchError, match='first argument of method focus must be of type React.ElementRef'):
            get_commands([member], {})

    def test_no_params_raises(self):
        with pytest.raises(ShapeMismatchError, match='React.ElementRef'):
            get_commands([prop('focus', func_type())], {})

    def test_non_void_return_raises(self):
        with pytest.raises(UnsupportedTypeError, match='must return void'):
            get_commands([command('measure', returns=kw('Boolean'))], {})

    def test_non_function_member_raises(self):
        with pytest.raises(UnsupportedTypeError, match='must be a function'):
            get_commands([prop('focus', kw('String'))], {})

    def test_object_param_raises(self):
        member = command('setRegion', param('region', ref('UnsafeMixed')))
        with pytest.raises(UnsupportedTypeError, match='Unsupported param type for method "setRegion", param "region"'):
            get_commands([member], {})

    def test_number_param_raises(self):
        with pytest.raises(UnsupportedTypeError, match='number'):
            get_commands([command('seek', param('t', kw('Number')))], {})
