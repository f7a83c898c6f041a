"""Make ``yuque_client`` importable from a source checkout."""

import os
import sys

# pytest started from another directory would not see the package otherwise.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
