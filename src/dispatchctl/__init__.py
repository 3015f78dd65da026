"""dispatchctl package.

Modules:
- dispatchctl.cli: CLI entry point package (dispatchctl) and built-in commands
- dispatchctl.lib.core: Registry, parser, dispatcher, config, paths, version
- dispatchctl.lib._util: Internal helpers (ANSI colours, debug logging)
"""

__all__ = [
    "cli",
    "lib",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("dispatchctl")
except PackageNotFoundError:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
