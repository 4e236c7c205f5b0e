"""
Structure lint tests.
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "cuiconnect"

COMPONENTS = [
    "accounts",
    "codec",
    "community",
    "membership",
    "notifications",
    "persistence",
    "reports",
]


class TestProjectStructure:
    """Verify project structure follows the component conventions."""

    def test_core_directories_exist(self) -> None:
        """Core functional directories must exist."""
        for name in ("domain", "rules", "adapters", "components", "app_shell"):
            assert (PACKAGE / name).is_dir(), f"cuiconnect/{name} missing"

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_components_have_standard_modules(self) -> None:
        """Every component exposes component.py, models.py and __init__.py."""
        for name in COMPONENTS:
            component_dir = PACKAGE / "components" / name
            for module in ("__init__.py", "component.py", "models.py"):
                assert (component_dir / module).is_file(), f"{name}/{module} missing"

    def test_init_files_present(self) -> None:
        """Python packages must have __init__.py files."""
        packages = [
            "cuiconnect",
            "cuiconnect/domain",
            "cuiconnect/rules",
            "cuiconnect/adapters",
            "cuiconnect/adapters/fs",
            "cuiconnect/components",
            "cuiconnect/app_shell",
        ]
        for pkg in packages:
            assert (PROJECT_ROOT / pkg / "__init__.py").is_file(), f"{pkg}/__init__.py missing"

    def test_component_init_exports_entry_points(self) -> None:
        """Component __init__ files declare __all__."""
        for name in COMPONENTS:
            init_text = (PACKAGE / "components" / name / "__init__.py").read_text()
            assert "__all__" in init_text, f"{name}/__init__.py has no __all__"
