"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from openpyxl import Workbook

from testdata_binder.config import Settings

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


ORDERS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<orders>
  <!-- sample orders -->
  <order>
    <id>A-1</id>
    <customer>alice</customer>
    <amount>12.50</amount>
    <items>
      <item sku="pen" quantity="2"/>
      <item sku="ink" quantity="1"/>
    </items>
  </order>
  <order>
    <id>A-2</id>
    <customer>bob</customer>
    <amount>3</amount>
  </order>
  <order>
    <id>A-3</id>
    <customer>carol</customer>
    <amount>7.25</amount>
  </order>
</orders>
"""


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def orders_xml(tmp_path: Path) -> Path:
    """Write the sample orders document and return its path."""
    path = tmp_path / "orders.xml"
    path.write_text(ORDERS_XML, encoding="utf-8")
    return path


@pytest.fixture
def users_workbook(tmp_path: Path) -> Path:
    """Write a workbook with ``UserRecord`` and ``Product`` sheets and return its path."""
    workbook = Workbook()
    users = workbook.active
    users.title = "UserRecord"
    users.append(["name", "age", "active"])
    users.append(["alice", 31, True])
    users.append(["bob", 45, False])
    users.append(["carol", 27, True])

    products = workbook.create_sheet("Product")
    products.append(["code", "price"])
    products.append(["P-1", 9.99])
    products.append(["P-2", 1.5])

    path = tmp_path / "users.xlsx"
    workbook.save(path)
    return path
