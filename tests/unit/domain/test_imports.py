"""The domain layer depends on ports, never on adapters or the interface."""

import ast
from pathlib import Path

import pytest

DOMAIN_DIR = Path(__file__).resolve().parents[3] / "flowdeck" / "domain"

FORBIDDEN_PREFIXES = ("flowdeck.adapter", "flowdeck.interface", "flowdeck.persistence")


def imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(), filename=str(path))
    modules = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize(
    "path", sorted(DOMAIN_DIR.rglob("*.py")), ids=lambda p: p.relative_to(DOMAIN_DIR).as_posix()
)
def test_domain_module_imports_no_outer_layer(path):
    offending = {m for m in imported_modules(path) if m.startswith(FORBIDDEN_PREFIXES)}

    assert offending == set()
