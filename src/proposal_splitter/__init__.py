"""Top-level package for the proposal splitter.

Provides subpackages:
- proposal_splitter.core – bookmark/result models and error types
- proposal_splitter.splitter – section location, outline filtering, extraction
- proposal_splitter.output – directory and zip writers
- proposal_splitter.bridge – host-embedding export
- proposal_splitter.cli – command line
"""

def _get_version() -> str:
    """Get version from installed metadata, or pyproject.toml in a source checkout."""
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("proposal-splitter")
    except PackageNotFoundError:
        pass

    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
