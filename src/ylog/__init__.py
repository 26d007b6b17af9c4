"""
ylog core package.

A small personal logbook kept in a local SQLite file:
- A Typer-based CLI (`ylog.cli`), installed as the `y` command
- Database helpers and the bundled schema (`ylog.database`, `sql/`)
- The log store and entry model (`ylog.logs`)

Configuration:
- Shared filesystem anchors and defaults live in `ylog.global_config`.
"""
