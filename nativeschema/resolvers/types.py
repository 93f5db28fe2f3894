"""
Type declaration table for a parsed file.
"""

from nativeschema.ast_nodes import declaration_name, node_type, program_body

TYPE_DECLARATIONS = ('TSTypeAliasDeclaration', 'TSInterfaceDeclaration', 'TSEnumDeclaration')


def get_types(ast):
    """Map every top-level type alias, interface and enum name to its declaration.

    Declarations wrapped in `export` are included. When a name is declared
    twice (interface merging) the last declaration wins.
    """
    types = {}
    for statement in program_body(ast):
        if node_type(statement) == 'ExportNamedDeclaration':
            statement = statement.get('declaration')
        if node_type(statement) in TYPE_DECLARATIONS:
            name = declaration_name(statement)
            if name:
                types[name] = statement
    return types
