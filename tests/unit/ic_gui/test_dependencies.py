import pytest

from tests.helpers.optional_imports import module_available

pytestmark = pytest.mark.unit_gui


def test_ic_gui_dependency_availability() -> None:
    if not module_available("PySide6"):
        pytest.skip("ic_gui dependencies missing")
    assert module_available("ic_gui.viewmodels") is True
