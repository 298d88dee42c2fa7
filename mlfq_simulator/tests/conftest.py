import os
import sys

import matplotlib

# Charts are written to files in tests, never shown
matplotlib.use("Agg")


def pytest_sessionstart(session):
    # Ensure repo root is on sys.path so 'mlfq_simulator' can be imported
    here = os.path.dirname(os.path.abspath(__file__))
    repo_root = os.path.abspath(os.path.join(here, os.pardir, os.pardir))
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)
