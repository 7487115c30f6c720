"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real upstream store
os.environ.setdefault("EMPLOYEE_API_URL", "http://employee-store.test/api/v1/employee")
os.environ.setdefault("LOG_FORMAT", "text")
