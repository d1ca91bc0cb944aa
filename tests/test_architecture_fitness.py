"""Architectural fitness functions to keep the package layering intact."""

import re
from pathlib import Path

ROOT = Path(__file__).parent.parent
PACKAGE_DIR = ROOT / "dartmouth_engine"


def test_no_python_modules_at_root():
    """Only entry points and config files may live at the repository root."""
    allowed = {"setup.py", "conftest.py", "main.py", "__main__.py"}
    violations = [f.name for f in ROOT.glob("*.py") if f.name not in allowed]

    assert not violations, (
        f"Unexpected Python modules at root: {violations}\n"
        "Code belongs inside the dartmouth_engine/ package."
    )


def test_core_does_not_import_services():
    """Core models and ports must not depend on the service layer."""
    violations = []
    for py_file in (PACKAGE_DIR / "core").rglob("*.py"):
        content = py_file.read_text(encoding="utf-8")
        if re.search(r"^from dartmouth_engine\.services", content, re.MULTILINE):
            violations.append(py_file.relative_to(PACKAGE_DIR))

    assert not violations, f"Core layer imports services: {violations}"


def test_handlers_do_not_import_router():
    """Handlers stay ignorant of how they are selected."""
    violations = []
    for py_file in (PACKAGE_DIR / "services" / "handlers").rglob("*.py"):
        content = py_file.read_text(encoding="utf-8")
        if "response_router" in content:
            violations.append(py_file.relative_to(PACKAGE_DIR))

    assert not violations, f"Handlers import the router: {violations}"


def test_no_global_random_in_handlers():
    """Template choice must go through the injected random source."""
    violations = []
    for py_file in (PACKAGE_DIR / "services" / "handlers").rglob("*.py"):
        content = py_file.read_text(encoding="utf-8")
        if re.search(r"\brandom\.(choice|random|randint|shuffle)\(", content):
            violations.append(py_file.relative_to(PACKAGE_DIR))

    assert not violations, f"Handlers use the global random generator: {violations}"
