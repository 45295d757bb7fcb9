# cutlog/config/__init__.py
# Persisted CLI settings
