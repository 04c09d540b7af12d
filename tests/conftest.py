import sys

from tests.consts import PROJECT_ROOT

# Ensure the package is importable without installing it
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
