"""Integration tests for the command-line interface.

These tests run the CLI in a subprocess and cover:
- Default XML output and plain text output
- Extension, include and exclude filtering
- Directory tree output
- Exit codes for usage errors and runtime errors
- Version information
"""

import os
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest

# These tests spawn subprocesses and are slow, so they only run with --run-cli-tests
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project():
    """Create a temporary project directory with test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base_dir = Path(tmpdir)

        (base_dir / "src").mkdir()
        (base_dir / "src" / "utils").mkdir()
        (base_dir / "target").mkdir()

        (base_dir / "src" / "main.rs").write_text("fn main() {\n    println!(\"<hi>\");\n}\n")
        (base_dir / "src" / "utils" / "helpers.rs").write_text("pub fn help() {}\n")
        (base_dir / "target" / "build.rs").write_text("// generated\n")
        (base_dir / "Cargo.toml").write_text("[package]\nname = \"demo\"\n")
        (base_dir / ".env").write_text("SECRET=1\n")

        yield base_dir


def run_cli(args, cwd=None, capture_output=True, timeout=10):
    """Run the concat CLI with the given arguments.

    Args:
        args: List of CLI arguments
        cwd: Working directory
        capture_output: Whether to capture stdout/stderr
        timeout: Maximum time to wait for command to complete

    Returns:
        CompletedProcess object with stdout/stderr as text if capture_output=True
    """
    cmd = [sys.executable, "-m", "concat.cli.main"] + args

    if capture_output:
        result = subprocess.run(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, cwd=cwd, timeout=timeout
        )
    else:
        result = subprocess.run(cmd, text=True, cwd=cwd, timeout=timeout)

    return result


def read_output(path):
    return Path(path).read_text(encoding="utf-8")


def test_default_xml_output(temp_project):
    result = run_cli(["-x", "rs", "-e", "*/target/*"], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    output = read_output(temp_project / "_concat-output.xml")
    assert output.startswith("<files>\n")
    assert output.endswith("</files>\n")
    assert f'<file path="{os.path.join(".", "src", "main.rs")}"><![CDATA[' in output
    assert "println!(\"&lt;hi&gt;\");" in output
    assert "helpers.rs" in output
    assert "build.rs" not in output
    assert "Cargo.toml" not in output


def test_plain_text_output_with_tree(temp_project):
    result = run_cli(["--text", "-t", "-x", "toml"], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    output = read_output(temp_project / "_concat-output.txt")
    assert output == (
        "[package]\nname = \"demo\"\n\n"
        "Directory tree:\n"
        ".env\n"
        "Cargo.toml\n"
        "_concat-output.txt\n"
        "src\n"
        "  main.rs\n"
        "  utils\n"
        "    helpers.rs\n"
        "target\n"
        "  build.rs\n"
    )


def test_include_patterns_and_hidden(temp_project):
    result = run_cli(["--text", "--hidden", "-i", "*.env", "-o", "hidden.txt"], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    assert read_output(temp_project / "hidden.txt") == "SECRET=1\n\n"


def test_non_recursive(temp_project):
    result = run_cli(["--text", "-n", "src"], cwd=temp_project)

    assert result.returncode == 0, result.stderr
    output = read_output(temp_project / "_concat-output.txt")
    assert "fn main()" in output
    assert "pub fn help" not in output


def test_summary_and_verbose(temp_project):
    result = run_cli(["-s", "-v", "-x", "rs", "src"], cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout == ""
    assert "Matched file:" in result.stderr
    assert "Files: 2" in result.stderr
    assert "Lines: 4" in result.stderr


def test_missing_root(temp_project):
    result = run_cli(["nonexistent"], cwd=temp_project)

    assert result.returncode == 1
    assert "Input path not found: nonexistent" in result.stderr


def test_usage_error(temp_project):
    result = run_cli(["--unknown"], cwd=temp_project)

    assert result.returncode == 2
    assert "usage:" in result.stderr


def test_version():
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("concat ")


def test_help():
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "--exclude" in result.stdout
    assert "--no-recursive" in result.stdout
