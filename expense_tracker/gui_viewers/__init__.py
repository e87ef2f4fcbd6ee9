# Re-export the tkinter-free helpers
from .table_rows import build_table_rows, format_row

__all__ = [
    "build_table_rows",
    "format_row",
]

# Lazily expose App to avoid importing tkinter during package import
def __getattr__(name):
    if name == "App":
        from .app import App  # imported only when actually accessed
        return App
    raise AttributeError(name)
