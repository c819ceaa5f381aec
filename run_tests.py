#!/usr/bin/env python
"""Run the PyXOI test suite with coverage."""

import sys
import subprocess


def run_tests(argv):
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--tb=short",
        "--cov=PyXOI",
        "--cov-report=term-missing",
    ] + argv

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        print("Tests failed with exit code {}".format(e.returncode))
        return e.returncode
    except KeyboardInterrupt:
        print("Tests interrupted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
