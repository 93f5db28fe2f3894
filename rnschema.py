import argparse
import sys
import os
import json

from builder import build_library, build_schema, collect_ast_files, set_verbose
from nativeschema.config import load_config
from nativeschema.errors import CodegenSchemaError
from nativeschema.library import wrap_component_schema


def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)


def fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def write_output(data, output, indent):
    text = json.dumps(data, indent=indent)
    if output:
        output_dir = os.path.dirname(output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output, 'w') as f:
            f.write(text + "\n")
        log(f"Schema written to {output}")
    else:
        print(text)


def cmd_build(args, config):
    """Build the schema of one AST file."""
    filepath = args.filename
    source = None
    if filepath is None or filepath == "-":
        # Read from stdin
        source = sys.stdin.read()
        filepath = "<stdin>"
    elif not os.path.exists(filepath):
        fail(f"File '{filepath}' not found.")

    try:
        schema = build_schema(filepath, source)
    except CodegenSchemaError as e:
        fail(f"Schema extraction failed:\n{e}")

    data = schema.to_dict() if args.raw else wrap_component_schema(schema)
    write_output(data, args.output, config.indent)


def cmd_combine(args, config):
    """Combine several AST files into one library schema."""
    files = []
    for source in args.sources:
        try:
            files.extend(collect_ast_files(source, config.include))
        except FileNotFoundError as e:
            fail(str(e))

    if not files:
        fail(f"No AST files matching '{config.include}' found")

    platform = args.platform or config.platform
    log(f"Combining {len(files)} file(s)" + (f" for {platform}" if platform else "") + "...")
    try:
        library = build_library(files, platform=platform)
    except CodegenSchemaError as e:
        fail(f"Schema extraction failed:\n{e}")

    write_output(library, args.output, config.indent)


def cmd_check(args, config):
    """Build each file and report a summary line without writing schemas."""
    failures = 0
    for filepath in args.filenames:
        try:
            schema = build_schema(filepath)
        except (CodegenSchemaError, OSError) as e:
            failures += 1
            print(f"✗ {filepath}: {e}", file=sys.stderr)
            continue
        print(
            f"✓ {filepath}: {schema.component_name} "
            f"({len(schema.props)} props, {len(schema.events)} events, {len(schema.commands)} commands"
            + (", state" if schema.state is not None else "") + ")"
        )
    if failures:
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Native component schema extractor")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    parser.add_argument("--config", help="Path to a config file (default: rnschema.json)")
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser("build", help="Build the schema of one AST file")
    build.add_argument("filename", nargs="?", default="-", help="AST JSON file (default: read from stdin)")
    build.add_argument("-o", "--output", help="Write the schema to this file instead of stdout")
    build.add_argument("--raw", action="store_true", help="Print the bare component schema instead of a library schema")

    combine = subparsers.add_parser("combine", help="Combine AST files into one library schema")
    combine.add_argument("sources", nargs="+", help="AST files or directories")
    combine.add_argument("-o", "--output", help="Write the schema to this file instead of stdout")
    combine.add_argument("--platform", help="Drop components that exclude this platform (ios, android)")

    check = subparsers.add_parser("check", help="Validate AST files and print a summary")
    check.add_argument("filenames", nargs="+")

    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        fail(f"Invalid config: {e}")

    if args.command == "build": cmd_build(args, config)
    elif args.command == "combine": cmd_combine(args, config)
    elif args.command == "check": cmd_check(args, config)
    else: parser.print_help()

if __name__ == "__main__":
    main()
