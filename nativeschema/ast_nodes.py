"""
Helpers for reading Babel-style TypeScript AST nodes.

Nodes are plain dicts as produced by dumping the parser output to JSON.
Every accessor here returns None (or an empty list) when the node does not
have the expected shape, so callers can probe for patterns without
try/except.
"""

CAST_EXPRESSIONS = ('TSAsExpression', 'TSSatisfiesExpression')
REFERENCE_TYPES = ('TSTypeReference', 'TSExpressionWithTypeArguments', 'TSInterfaceHeritage')


def node_type(node):
    """Return the node's type tag, or None if it is not a node."""
    if isinstance(node, dict):
        return node.get('type')
    return None


def program_body(ast):
    """Return the top-level statements of a File or Program node."""
    if node_type(ast) == 'File':
        ast = ast.get('program')
    if not isinstance(ast, dict):
        return []
    body = ast.get('body')
    return body if isinstance(body, list) else []


def identifier_name(node):
    """Name of an Identifier, or the right-most name of a qualified name."""
    kind = node_type(node)
    if kind == 'Identifier':
        return node.get('name')
    if kind == 'TSQualifiedName':
        return identifier_name(node.get('right'))
    return None


def qualified_name(node):
    """Full dotted name of an Identifier or TSQualifiedName (e.g. React.ElementRef)."""
    kind = node_type(node)
    if kind == 'Identifier':
        return node.get('name')
    if kind == 'TSQualifiedName':
        left = qualified_name(node.get('left'))
        right = identifier_name(node.get('right'))
        if left and right:
            return f"{left}.{right}"
    return None


def unwrap_type_cast(expression):
    """Strip a single `expr as T` (or `satisfies`) wrapper."""
    if node_type(expression) in CAST_EXPRESSIONS:
        return expression.get('expression')
    return expression


def callee_name(call):
    """Name of the function called by a CallExpression."""
    if node_type(call) != 'CallExpression':
        return None
    return identifier_name(call.get('callee'))


def call_arguments(call):
    """Ordinary arguments of a call."""
    if not isinstance(call, dict):
        return []
    args = call.get('arguments')
    return args if isinstance(args, list) else []


def type_arguments(node):
    """Type arguments of a call or type reference.

    Babel 7 stores these under `typeParameters`, Babel 8 under
    `typeArguments`.
    """
    if not isinstance(node, dict):
        return []
    instantiation = node.get('typeArguments') or node.get('typeParameters')
    if not isinstance(instantiation, dict):
        return []
    params = instantiation.get('params')
    return params if isinstance(params, list) else []


def reference_name(node):
    """Type name referenced by a TSTypeReference or heritage clause."""
    kind = node_type(node)
    if kind == 'TSTypeReference':
        return identifier_name(node.get('typeName'))
    if kind in ('TSExpressionWithTypeArguments', 'TSInterfaceHeritage'):
        return identifier_name(node.get('expression'))
    return None


def literal_value(node):
    """Value of a string, numeric, boolean or null literal.

    Returns a (found, value) pair so that a literal `null` can be told apart
    from a non-literal node.
    """
    kind = node_type(node)
    if kind in ('StringLiteral', 'NumericLiteral', 'BooleanLiteral'):
        return True, node.get('value')
    if kind == 'NullLiteral':
        return True, None
    if kind == 'Literal':
        return True, node.get('value')
    if kind == 'UnaryExpression' and node.get('operator') == '-':
        found, value = literal_value(node.get('argument'))
        if found and isinstance(value, (int, float)) and not isinstance(value, bool):
            return True, -value
    return False, None


def property_key_name(member):
    """Name of an object/interface member key (identifier or string key)."""
    if not isinstance(member, dict):
        return None
    key = member.get('key')
    name = identifier_name(key)
    if name is None and node_type(key) in ('StringLiteral', 'Literal'):
        name = key.get('value')
    return name


def member_annotation(member):
    """Type annotation attached to an interface or object-type member."""
    if not isinstance(member, dict):
        return None
    wrapper = member.get('typeAnnotation')
    if node_type(wrapper) == 'TSTypeAnnotation':
        return wrapper.get('typeAnnotation')
    return wrapper


def declaration_name(declaration):
    """Name bound by a declaration node (`id.name`)."""
    if not isinstance(declaration, dict):
        return None
    return identifier_name(declaration.get('id'))


def interface_members(declaration):
    """Member list of a TSInterfaceDeclaration, or None if unreadable."""
    body = declaration.get('body') if isinstance(declaration, dict) else None
    members = body.get('body') if isinstance(body, dict) else None
    return members if isinstance(members, list) else None
