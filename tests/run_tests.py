"""Suite runners for the matching service.

Each suite maps to a pytest invocation against the test settings. The
coverage run measures only the service packages.
"""

import subprocess
import sys

SETTINGS = "matching_service.settings_test"
SOURCE_PACKAGES = "core,matching_service"

SUITES = {
    "unit": ["tests/unit"],
    "component": ["tests/component"],
    "dependency": ["tests/dependency"],
    "jobs": ["tests/unit/core/jobs", "tests/unit/core/signals"],
}
SUITES["all"] = SUITES["unit"] + SUITES["component"] + SUITES["dependency"]


def pytest_command(suite, *extra):
    """Build the pytest argv for a named suite."""
    try:
        paths = SUITES[suite]
    except KeyError:
        raise ValueError(
            f"Unknown suite '{suite}', expected one of {sorted(SUITES)}"
        ) from None
    return ["pytest", f"--ds={SETTINGS}", *paths, *extra]


def run_command(command):
    """Run an argv list and return its exit code."""
    print(" ".join(command))
    return subprocess.run(command, check=False).returncode


def run_suite(suite):
    print(f"Running {suite} tests...")
    sys.exit(run_command(pytest_command(suite)))


def run_all():
    run_suite("all")


def run_unit():
    run_suite("unit")


def run_component():
    run_suite("component")


def run_dependency():
    run_suite("dependency")


def run_jobs():
    """Deferred jobs and the signals that enqueue them."""
    run_suite("jobs")


def run_coverage():
    """Run every suite under coverage and write terminal and HTML reports."""
    print("Running tests with coverage...")
    commands = [
        ["coverage", "erase"],
        [
            "coverage",
            "run",
            f"--source={SOURCE_PACKAGES}",
            "-m",
            *pytest_command("all"),
        ],
        ["coverage", "report", "--show-missing"],
        ["coverage", "html"],
    ]

    for command in commands:
        exit_code = run_command(command)
        if exit_code != 0:
            sys.exit(exit_code)

    print("\nCoverage HTML report generated in htmlcov/")
    sys.exit(0)


if __name__ == "__main__":
    run_suite(sys.argv[1] if len(sys.argv) > 1 else "all")
