import sys
import os
import glob
import json
import fnmatch

from nativeschema.assembler import SchemaAssembler
from nativeschema.errors import CodegenSchemaError, MalformedInputError
from nativeschema.library import combine_schemas, filter_by_platform, wrap_component_schema

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def load_ast(file_path, source=None):
    """Read a parsed component file dumped as JSON.

    Args:
        file_path: Path of the AST file, used for reading and in error messages.
        source: JSON text to use instead of reading the file (for stdin).
    """
    if source is None:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                source = f.read()
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                f"AST is not valid UTF-8 ({e.reason} at byte {e.start})",
                filename=file_path,
            )

    try:
        ast = json.loads(source)
    except json.JSONDecodeError as e:
        raise MalformedInputError(
            f"AST is not valid JSON ({e.msg} at line {e.lineno} column {e.colno})",
            filename=file_path,
            suggestion="Dump the parser output with JSON.stringify(ast)",
        )

    if not isinstance(ast, dict) or ast.get('type') not in ('File', 'Program'):
        raise MalformedInputError(
            "AST root must be a File or Program node",
            filename=file_path,
        )
    return ast


def build_schema(file_path, source=None, resolver=None):
    """Build the ComponentSchema of one AST file."""
    debug_log(f"Loading AST: {file_path}")
    ast = load_ast(file_path, source)

    # STEP 1: LOCATE AND ASSEMBLE
    try:
        schema = SchemaAssembler(resolver=resolver).assemble(ast)
    except CodegenSchemaError as e:
        if e.filename is None:
            raise e.with_filename(file_path) from e
        raise

    # STEP 2: REPORT
    debug_log(
        f"Found component {schema.component_name}: {len(schema.props)} props, "
        f"{len(schema.events)} events, {len(schema.commands)} commands"
        + (", with state" if schema.state is not None else "")
    )
    if schema.extends_props:
        debug_log(f"Extends: {', '.join(str(e.get('knownTypeName')) for e in schema.extends_props)}")
    return schema


def collect_ast_files(source, pattern):
    """AST files under a directory matching the pattern; a file path is returned as-is."""
    if os.path.isfile(source):
        return [source]
    if os.path.isdir(source):
        files = glob.glob(os.path.join(source, '**', '*.json'), recursive=True)
        return sorted(f for f in files if fnmatch.fnmatch(os.path.basename(f), pattern))
    raise FileNotFoundError(f"'{source}' is neither a file nor directory")


def build_library(file_paths, platform=None, resolver=None):
    """Combined library schema for several AST files."""
    schemas = []
    for file_path in file_paths:
        schema = build_schema(file_path, resolver=resolver)
        schemas.append(wrap_component_schema(schema))

    library = combine_schemas(schemas)
    if platform:
        before = len(library['modules'])
        library = filter_by_platform(library, platform)
        debug_log(f"Platform {platform}: kept {len(library['modules'])} of {before} modules")
    return library
