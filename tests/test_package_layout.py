# Tests for verifying the package skeleton is importable and documented.

import importlib
import pkgutil

import datewise

ENGINE_MODULES = {
    "classifier",
    "combinations",
    "formatter",
    "models",
    "ordering",
    "parser",
    "tags",
    "validator",
}


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert datewise.__doc__ and datewise.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(datewise.__path__, datewise.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_engine_stages_are_separate_modules() -> None:
    import datewise.engine as engine

    found = {info.name for info in pkgutil.iter_modules(engine.__path__)}
    assert ENGINE_MODULES <= found


def test_top_level_services_importable() -> None:
    for name in ("cli", "config", "julian", "names", "utils.errors", "utils.logging"):
        importlib.import_module(f"datewise.{name}")
    assert datewise.parse_date_string is datewise.engine.parse_date_string
    assert datewise.get_calendar_names("en") is datewise.names.ENGLISH
