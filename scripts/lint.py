"""
Lint script runner.
"""
import subprocess

LINT_TARGETS = ["./bhailang", "./bhai.py", "./vscode/server/main.py"]


def lint_commands() -> list[list[str]]:
    """
    Return the flake8 and pylint command lines for the BhaiLang sources.
    """
    return [
        ["flake8", *LINT_TARGETS, "--exclude=bhailang/tests", "--max-line-length=100"],
        ["pylint", *LINT_TARGETS, "--ignore=tests", "--max-line-length=100"],
    ]


def main():
    """
    Lint the BhaiLang project using flake8 and pylint.
    """
    for command in lint_commands():
        print(f"Running {command[0]}...")
        subprocess.run(command, check=True)


if __name__ == "__main__":
    main()
