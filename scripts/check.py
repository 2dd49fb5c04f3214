"""Run code quality checks: ruff, mypy, vulture, and pytest.

Pass check names to run a subset, e.g. ``python scripts/check.py ruff pytest``.
"""

import subprocess
import sys

CHECKS = {
    "ruff": ["ruff", "check", "."],
    "mypy": ["mypy"],
    "vulture": ["vulture", "airgradient_exporter/", "vulture_whitelist.py", "--min-confidence", "80"],
    "pytest": ["pytest"],
}


def main() -> None:
    selected = sys.argv[1:] or list(CHECKS)
    unknown = [name for name in selected if name not in CHECKS]
    if unknown:
        print(f"Unknown check(s): {', '.join(unknown)}", file=sys.stderr)
        sys.exit(2)

    failed: list[str] = []

    for name in selected:
        print(f"\n{'=' * 60}\n  Running {name}\n{'=' * 60}\n")

        if subprocess.run(CHECKS[name]).returncode != 0:
            failed.append(name)

    print(f"\n{'=' * 60}")
    if failed:
        print(f"  FAILED: {', '.join(failed)}")
        print(f"{'=' * 60}")
        sys.exit(1)

    print("  All checks passed.")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
