"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; ``tests/test_metadata.py`` keeps them in
sync so ``--version``, ``info`` and configuration path discovery agree with
the installed distribution.

Contents:
    * Project identity: :data:`name`, :data:`title`, :data:`version`.
    * Console entry: :data:`shell_command`.
    * lib_layered_config identifiers: ``LAYEREDCONF_*``.
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

name = "pipeline_demo"
title = "Build-validation demo for multibranch CI pipelines"
version = "1.0.0"
homepage = "https://example.com/pipeline-demo"
author = "Pipeline Demo Maintainers"
author_email = "maintainers@example.com"
shell_command = "pipeline-demo"

#: Vendor segment of configuration paths on macOS and Windows.
LAYEREDCONF_VENDOR: str = "example"
#: Application segment of configuration paths on macOS and Windows.
LAYEREDCONF_APP: str = "Pipeline Demo"
#: Directory slug on Linux (``~/.config/<slug>/``).
LAYEREDCONF_SLUG: str = "pipeline-demo"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for pipeline_demo:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
