"""Top-level package for the Class Registration form.

Provides subpackages:
- class_registration.core – form state and data models
- class_registration.submission – gateway and submit flow
- class_registration.gui – PySide6 window and widgets
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("class-registration")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
