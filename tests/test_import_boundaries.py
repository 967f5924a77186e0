"""
Import Boundary Tests.

Validates that architectural import rules are followed:
- web/services/* may ONLY import from core/*
- web/blueprints/* go through web/services, never utils/ or core/ directly
- core/* may NOT import from web/, flask, werkzeug
- utils/* stay free of core/ and web/ imports
"""

import ast
from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_imports_from_file(filepath: Path) -> list[tuple[str, int]]:
    """
    Extract all import statements from a Python file.

    Returns:
        List of (module_name, line_number) tuples
    """
    imports = []
    try:
        with open(filepath, encoding="utf-8") as f:
            tree = ast.parse(f.read(), filename=str(filepath))
    except SyntaxError:
        return imports

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append((alias.name, node.lineno))
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.append((node.module, node.lineno))

    return imports


def check_forbidden_imports(
    imports: list[tuple[str, int]], forbidden_prefixes: list[str]
) -> list[tuple[str, int]]:
    """
    Check for forbidden imports.

    Returns:
        List of (module_name, line_number) for violations
    """
    violations = []
    for module, line in imports:
        for prefix in forbidden_prefixes:
            if module == prefix.rstrip(".") or module.startswith(prefix):
                violations.append((module, line))
                break
    return violations


def collect_violations(directory: Path, forbidden: list[str]) -> list[str]:
    all_violations = []
    for py_file in sorted(directory.glob("*.py")):
        if py_file.name == "__init__.py":
            continue
        imports = get_imports_from_file(py_file)
        for module, line in check_forbidden_imports(imports, forbidden):
            all_violations.append(f"{py_file.name}:{line} imports {module}")
    return all_violations


class TestWebLayerBoundaries:
    """Tests for web layer import boundaries."""

    def test_services_only_import_from_core(self):
        """web/services/* should only import from core/*."""
        services_dir = get_project_root() / "web" / "services"

        all_violations = collect_violations(services_dir, ["utils.", "config"])

        assert len(all_violations) == 0, (
            "Services should only import from core/*. Violations:\n"
            + "\n".join(all_violations)
        )

    def test_blueprints_use_services(self):
        """web/blueprints/* must not reach into utils/ or core/ directly."""
        blueprints_dir = get_project_root() / "web" / "blueprints"

        all_violations = collect_violations(blueprints_dir, ["utils.", "core."])

        assert len(all_violations) == 0, (
            "Blueprints should go through web/services. Violations:\n"
            + "\n".join(all_violations)
        )

    def test_core_does_not_import_web(self):
        """core/* should never import from web/, flask, werkzeug."""
        core_dir = get_project_root() / "core"

        all_violations = collect_violations(core_dir, ["web.", "flask", "werkzeug"])

        assert len(all_violations) == 0, (
            "Core should never import web layer. Violations:\n"
            + "\n".join(all_violations)
        )

    def test_utils_do_not_import_upper_layers(self):
        """utils/* are leaf helpers and must not import core/ or web/."""
        utils_dir = get_project_root() / "utils"

        all_violations = collect_violations(
            utils_dir, ["core.", "web.", "flask", "werkzeug"]
        )

        assert len(all_violations) == 0, (
            "utils/ must stay independent of core/ and web/. Violations:\n"
            + "\n".join(all_violations)
        )


class TestModuleStructure:
    """Tests for module structure integrity."""

    def test_core_modules_exist(self):
        """Verify all required core modules exist."""
        core_dir = get_project_root() / "core"

        required_modules = [
            "models.py",
            "unit_status_core.py",
            "journal_core.py",
            "introspection_core.py",
            "settings_core.py",
        ]

        missing = [m for m in required_modules if not (core_dir / m).exists()]

        assert len(missing) == 0, f"Missing core modules: {missing}"

    def test_service_modules_exist(self):
        """Verify all required service modules exist."""
        services_dir = get_project_root() / "web" / "services"

        required_modules = [
            "auth_service.py",
            "health_service.py",
            "unit_service.py",
        ]

        missing = [m for m in required_modules if not (services_dir / m).exists()]

        assert len(missing) == 0, f"Missing service modules: {missing}"
