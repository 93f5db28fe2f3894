"""
Unit tests for nativeschema/locator.py - ComponentConfigLocator.
"""

import pytest

from ast_builders import (
    call,
    cast,
    commands_export,
    component_export,
    const,
    export_default,
    export_named,
    ident,
    interface,
    kw,
    literal,
    obj,
    program,
    prop,
    ref,
    type_alias,
    type_literal,
)
from nativeschema.errors import ShapeMismatchError, StructuralError
from nativeschema.locator import (
    ComponentConfigLocator,
    find_component_config,
    probe_commands_call,
    probe_component_call,
    validate_commands_call,
)


class TestComponentDeclaration:
    """Tests for finding the codegenNativeComponent default export."""

    @pytest.fixture
    def locator(self):
        return ComponentConfigLocator()

    def test_finds_component_and_props_names(self, locator):
        """Component name and props type name come from the call."""
        ast = program(
            interface('NativeProps', prop('enabled', kw('Boolean'))),
            component_export('RCTSwitch', 'NativeProps'),
        )
        config = locator.locate(ast)

        assert config.component_name == 'RCTSwitch'
        assert config.props_type_name == 'NativeProps'
        assert config.options_expression is None

    def test_type_cast_is_unwrapped(self, locator):
        """`codegenNativeComponent<P>(...) as HostComponent<P>` is recognized."""
        wrapped = component_export('Slider')
        wrapped['declaration'] = cast(wrapped['declaration'], ref('HostComponent', ref('NativeProps')))
        config = locator.locate(program(wrapped))

        assert config.component_name == 'Slider'
        assert config.props_type_name == 'NativeProps'

    def test_options_expression_is_kept_verbatim(self, locator):
        """A second argument is returned unchanged as the options expression."""
        options = obj(interfaceOnly=True)
        config = locator.locate(program(component_export('Map', options=options)))

        assert config.options_expression == options

    def test_accepts_program_root(self, locator):
        """A bare Program node works as well as a File node."""
        ast = program(component_export('Foo'))['program']
        assert locator.locate(ast).component_name == 'Foo'

    def test_no_component_raises(self, locator):
        """A file without a component declaration is rejected."""
        ast = program(interface('NativeProps'))
        with pytest.raises(StructuralError, match="Could not find component config"):
            locator.locate(ast)

    def test_two_components_raise(self, locator):
        """Only one component may be declared per file."""
        ast = program(component_export('A'), component_export('B'))
        with pytest.raises(StructuralError, match="Only one component is supported per file"):
            locator.locate(ast)

    def test_other_default_exports_are_skipped(self, locator):
        """Default exports that are not component calls do not count."""
        ast = program(
            export_default(ident('Something')),
            export_default(call('requireNativeComponent', literal('X'))),
            export_default(call('codegenNativeComponent', literal('NoTypes'))),
            component_export('Real'),
        )
        assert locator.locate(ast).component_name == 'Real'

    def test_malformed_default_exports_are_skipped(self, locator):
        """Broken shapes while searching are treated as no match."""
        broken_callee = {'type': 'CallExpression', 'callee': None, 'arguments': []}
        ast = program(
            {'type': 'ExportDefaultDeclaration', 'declaration': None},
            export_default(broken_callee),
            component_export('Real'),
        )
        assert locator.locate(ast).component_name == 'Real'

    def test_find_component_config_helper(self):
        """Module-level helper delegates to the locator."""
        assert find_component_config(program(component_export('Foo'))).component_name == 'Foo'


class TestProbes:
    """Tests for the non-raising probe functions."""

    def test_probe_component_rejects_non_exports(self):
        assert probe_component_call(const('x', call('codegenNativeComponent'))) is None

    def test_probe_component_requires_string_name(self):
        """A non-literal component name is not a match."""
        statement = export_default(call('codegenNativeComponent', ident('NAME'), types=[ref('P')]))
        assert probe_component_call(statement) is None

    def test_probe_commands_ignores_other_exports(self):
        assert probe_commands_call(export_named(interface('Foo'))) is None
        assert probe_commands_call(export_named(const('x', call('other')))) is None
        assert probe_commands_call({'type': 'ExportNamedDeclaration', 'declaration': None}) is None

    def test_probe_commands_returns_call(self):
        statement = commands_export()
        call_node = probe_commands_call(statement)
        assert call_node['callee']['name'] == 'codegenNativeCommands'


class TestCommandsDeclaration:
    """Tests for codegenNativeCommands discovery and validation."""

    @pytest.fixture
    def locator(self):
        return ComponentConfigLocator()

    def test_commands_type_and_options(self, locator):
        """Command type name and options expression are extracted."""
        ast = program(component_export(), commands_export('NativeCommands', ['focus', 'blur']))
        config = locator.locate(ast)

        assert config.command_type_name == 'NativeCommands'
        assert config.command_options_expression['type'] == 'ObjectExpression'

    def test_no_commands(self, locator):
        config = locator.locate(program(component_export()))
        assert config.command_type_name is None
        assert config.command_options_expression is None

    def test_commands_without_options_raise(self, locator):
        """The options argument is mandatory."""
        statement = export_named(const('Commands', call('codegenNativeCommands', types=[ref('Cmds')])))
        with pytest.raises(ShapeMismatchError, match="must be passed options"):
            locator.locate(program(component_export(), statement))

    def test_inline_command_type_raises(self, locator):
        """An inline type literal is not accepted as the commands type."""
        statement = export_named(const('Commands', call(
            'codegenNativeCommands',
            obj(supportedCommands=['focus']),
            types=[type_literal(prop('focus', kw('Void')))],
        )))
        with pytest.raises(ShapeMismatchError, match="doesn't support inline definitions"):
            locator.locate(program(component_export(), statement))

    def test_missing_command_type_raises(self):
        """A commands call without type arguments fails validation."""
        with pytest.raises(ShapeMismatchError, match="inline definitions"):
            validate_commands_call(call('codegenNativeCommands', obj(supportedCommands=['a'])))

    def test_commands_called_twice_raise(self, locator):
        ast = program(component_export(), commands_export(), commands_export())
        with pytest.raises(StructuralError, match="may only be called once"):
            locator.locate(ast)


class TestNativeState:
    """Tests for NativeState type discovery."""

    @pytest.fixture
    def locator(self):
        return ComponentConfigLocator()

    def test_no_state(self, locator):
        assert locator.locate(program(component_export())).state_type_name == ''

    def test_local_state_interface(self, locator):
        ast = program(interface('MyNativeState', prop('x', kw('String'))), component_export())
        assert locator.locate(ast).state_type_name == 'MyNativeState'

    def test_exported_state_alias(self, locator):
        """Exported declarations of any kind are candidates."""
        ast = program(export_named(type_alias('NativeStateType', type_literal())), component_export())
        assert locator.locate(ast).state_type_name == 'NativeStateType'

    def test_two_states_raise(self, locator):
        """More than one NativeState is rejected and the component is named."""
        ast = program(
            interface('FirstNativeState'),
            export_named(interface('SecondNativeState')),
            component_export('Video'),
        )
        with pytest.raises(StructuralError, match="Found 2 NativeStates for Video"):
            locator.locate(ast)

    def test_export_specifiers_are_ignored(self, locator):
        """`export {a, b}` has no declaration and is not a candidate."""
        specifiers = {'type': 'ExportNamedDeclaration', 'declaration': None, 'specifiers': []}
        ast = program(specifiers, component_export())
        assert locator.locate(ast).state_type_name == ''
