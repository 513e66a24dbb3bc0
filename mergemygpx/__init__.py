"""mergemygpx - Merge, invert and decimate GPX track files.

Prepares GPS track files for import into mapping tools that limit the
number of points per file:
- Merge several files into one single-track file
- Invert the travel direction of tracks
- Decimate points (keeping segment endpoints)
- Summarize files (tracks, segments, point counts)

Modules:
    core: Validation, directory scanning, output naming, transforms, GPX I/O
    model: Value types (Action, Failure, CommandResult)
    commands: One function per command, returning a CommandResult
    cli: Typer command-line interface

Example:
    from mergemygpx import commands
    result = commands.merge_all(Path("rides/"))
"""
