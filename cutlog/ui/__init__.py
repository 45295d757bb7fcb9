# cutlog/ui/__init__.py
# Rich rendering for cutlog results; display modules are imported directly by commands
