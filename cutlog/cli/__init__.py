# cutlog/cli/__init__.py
# Typer CLI; `app` is the console-script entry point

from .app import app

__all__ = ["app"]
