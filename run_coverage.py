"""
Coverage runner script for evented.
Run tests with coverage reporting.
"""

import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage():
    """Run tests with coverage and generate reports."""

    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "--cov=evented",
        "--cov-branch",
        "--cov-report=term-missing",
        "--cov-report=html",
        "--cov-report=xml",
    ]

    project_dir = Path(__file__).resolve().parent
    result = subprocess.run(cmd, check=False, cwd=str(project_dir))

    if result.returncode == 0:
        html_path = project_dir / "htmlcov" / "index.html"
        if html_path.exists():
            webbrowser.open(f"file://{html_path}")
    else:
        sys.exit(result.returncode)


if __name__ == "__main__":
    run_coverage()
