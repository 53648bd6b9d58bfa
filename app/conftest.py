"""Root conftest for the app test suite.

Sets required environment variables before any test module imports main.py,
which reads SESSION_KEY at module load time.
"""

import os
import sys

os.environ.setdefault("SESSION_KEY", "test-session-key-not-for-production")

# The web app is run from this directory (``gunicorn main:app``), so its
# modules import each other as top-level names.
sys.path.insert(0, os.path.dirname(__file__))
