# topmark:header:start
#
#   project      : TagPrint
#   file         : __main__.py
#   file_relpath : src/tagprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TagPrint via ``python -m tagprint``.

Delegates to :func:`tagprint.cli.main.cli`, the same entry point as the
``tagprint`` console script.

Examples:
    Render markup::

        python -m tagprint render "[b][red]alert[/][/]"
"""

from __future__ import annotations

from tagprint.cli.main import cli

if __name__ == "__main__":
    cli()
