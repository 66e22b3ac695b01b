"""
BhaiLang Scanner

This is the main entry point for the BhaiLang scanner.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into classified tokens.
3. Each token is printed on its own line for the downstream parser or user.

An unrecognized character stops the scan. No tokens are printed for that
file and the process exits with status 1.
"""
import os
import sys
from collections import Counter

from bhailang.exceptions import UnrecognizedCharacterError
from bhailang.lexer import tokenize


def print_usage():
    """
    Print usage.
    """
    print()
    print("BhaiLang Scanner")
    print()
    print("Usage:")
    print("    bhai <script>")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a BhaiLang source file to tokenize. Each token is")
    print("        printed on its own line.")
    print()
    print("Example:")
    print("    bhai test.txt")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_summary(tokens):
    """
    Print a count of tokens per type
    """
    print("\nToken summary:\n", file=sys.stderr)
    for type_, count in Counter(tok.type for tok in tokens).most_common():
        print(f"    {type_.name:<16} {count}", file=sys.stderr)
    print(f"    {'TOTAL':<16} {len(tokens)}", file=sys.stderr)


def report_unrecognized(err: UnrecognizedCharacterError):
    """
    Print the unrecognized character diagnostic to stderr
    """
    print(
        "Unrecognized character found in source: ",
        err.code_point,
        err.char,
        file=sys.stderr,
    )
    print(f"{type(err).__name__}: {err}", file=sys.stderr)


def run_script(script_name: str) -> int:
    """
    Tokenize a script and print its tokens
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(code, script_name)
    except UnrecognizedCharacterError as e:
        report_unrecognized(e)
        return 1

    for token in tokens:
        print(token)

    if os.environ.get('BHAIDEBUG'):
        debug_print_summary(tokens)

    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("BhaiLang Scanner - REPL")
    print("Type `exit` or `quit` to leave.")
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            try:
                for token in tokenize(line, "<stdin>"):
                    print(token)
            except UnrecognizedCharacterError as e:
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and tokenize it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
