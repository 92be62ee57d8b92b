"""Root conftest — shared test configuration."""

import os

# Ensure tests never read the developer's real clasp credentials or .env
os.environ.setdefault("SCRIPTOPS_CLASPRC_PATH", "/nonexistent/scriptops-test/.clasprc.json")
os.environ.setdefault("SCRIPTOPS_PROJECT_FILE", "/nonexistent/scriptops-test/.clasp.json")
os.environ.setdefault("SCRIPTOPS_LOG_LEVEL", "WARNING")
