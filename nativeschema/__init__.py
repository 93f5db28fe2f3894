# Native component schema extraction
"""
Core modules for native component schema extraction:
- errors: Error types with source locations and hints
- ast_nodes: Safe accessors for Babel-style TypeScript AST nodes
- models: ComponentConfig, CommandOptions and ComponentSchema
- locator: Finds the component, commands and state declarations
- assembler: Builds the ComponentSchema from the located config
- resolvers: Type resolution for props, events, commands and state
- library: Wraps and combines component schemas into library schemas
- config: Generator configuration
"""

from .errors import (
    CodegenSchemaError,
    MalformedInputError,
    ShapeMismatchError,
    StructuralError,
    UnsupportedTypeError,
)
from .models import CommandOptions, ComponentConfig, ComponentSchema
from .locator import ComponentConfigLocator, find_component_config
from .assembler import SchemaAssembler, build_component_schema
from .resolvers import DefaultTypeResolver, TypeResolver
from .library import combine_schemas, filter_by_platform, wrap_component_schema
from .config import GeneratorConfig, load_config

__all__ = [
    'CodegenSchemaError',
    'MalformedInputError',
    'ShapeMismatchError',
    'StructuralError',
    'UnsupportedTypeError',
    'CommandOptions',
    'ComponentConfig',
    'ComponentSchema',
    'ComponentConfigLocator',
    'find_component_config',
    'SchemaAssembler',
    'build_component_schema',
    'DefaultTypeResolver',
    'TypeResolver',
    'combine_schemas',
    'filter_by_platform',
    'wrap_component_schema',
    'GeneratorConfig',
    'load_config',
]
