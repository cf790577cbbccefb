#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/utils/decorators.py
"""Decorators shared by the parser, renderer and template layers.

``requires_dependencies`` guards every entry point that needs mistune,
PyYAML or Jinja2 so that a missing or outdated package surfaces as a
DependencyError naming the package, rather than an ImportError deep inside
a conversion. ``debug_timer`` reports how long parsing and rendering took
when DEBUG logging is on.
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from importlib import metadata
from typing import Any, Callable, Generator, List, Optional, Tuple

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from md2typ.exceptions import DependencyError


def installed_version(distribution: str) -> Optional[str]:
    """Return the installed version of ``distribution`` (its pip name), or None."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


def _version_mismatch(distribution: str, version_spec: str) -> Optional[Tuple[str, str, str]]:
    """Return ``(name, spec, installed)`` if the installed version misses ``version_spec``."""
    found = installed_version(distribution)
    if found is None:
        return distribution, version_spec, "unknown"
    try:
        if Version(found) in SpecifierSet(version_spec):
            return None
    except InvalidVersion:
        pass
    return distribution, version_spec, found


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check that third-party packages are importable before calling the method.

    Parameters
    ----------
    converter_name : str
        Component named in the error message, e.g. "markdown" or "templates"
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples as defined by
        the ``DEPS_*`` constants; an empty ``version_spec`` accepts any version

    Returns
    -------
    Callable
        Decorator applying the check on every call

    Raises
    ------
    DependencyError
        If a package cannot be imported or its version is outside the spec

    Examples
    --------
        >>> @requires_dependencies("templates", DEPS_JINJA)
        ... def render_table(self, data):
        ...     from jinja2 import Environment
        ...     ...

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing: list[tuple[str, str]] = []
            mismatches: list[tuple[str, str, str]] = []
            first_import_error: ImportError | None = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    first_import_error = first_import_error or e
                    continue
                if version_spec:
                    mismatch = _version_mismatch(install_name, version_spec)
                    if mismatch is not None:
                        mismatches.append(mismatch)

            if missing or mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=first_import_error,
                ) from first_import_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the duration of the enclosed block at DEBUG level.

    The clock is only read when ``logger`` has DEBUG enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger that receives the timing record
    operation : str
        Label for the record, e.g. "Rendering (typst)"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - started:.3f}s")
