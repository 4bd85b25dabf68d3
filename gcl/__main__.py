"""CLI entry point for the interpreter.

Usage:
    python -m gcl [-v|-vv|-vvv|-vvvv] [--parser {descent,lark}] <program_file>
    python -m gcl [-v...] --emit-ast <program_file>
    python -m gcl [-v...] --ast <ast_json_file>

Options:
  -v            Verbose run: print the tree, a prompt before every read and
                the variable state after every assignment or read. Repeat
                to also write a debug trace of the given level - 1.
  --parser      Parser used for source files (default: descent)
  --emit-ast    Parse the given program file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
the debug level is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from . import lark_parser, parser as descent_parser
from .ast_json import ast_to_obj, ast_from_obj
from .errors import GclError
from .interpreter import Interpreter

PARSERS = {
    'descent': descent_parser.parse_program,
    'lark': lark_parser.parse_program,
}


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Guarded command language interpreter")
    parser.add_argument('-v', action='count', default=0,
                        help='verbose run; repeat to increase debug verbosity')
    parser.add_argument('--parser', choices=sorted(PARSERS), default='descent',
                        help='parser used for program files')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    parse_program = PARSERS[args.parser]
    verbose = args.v >= 1
    debug_level = max(args.v - 1, 0)

    try:
        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            ast_program = parse_program(read_source(program_file))
            obj = ast_to_obj(ast_program)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(obj, out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                ast_program = ast_from_obj(data)
            except (ValueError, TypeError) as e:
                # json.JSONDecodeError is a ValueError
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            # Default: execute source file
            if not args.program:
                parser.error('missing program file; or use --emit-ast/--ast')
            ast_program = parse_program(read_source(Path(args.program)))

        interpreter = Interpreter(verbose=verbose, debug_level=debug_level)
        interpreter.run(ast_program)
    except GclError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
