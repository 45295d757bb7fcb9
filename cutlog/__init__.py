# cutlog/__init__.py
# Wire-EDM shop job tracker: machine hours, pause timer, costing & QA progress

__version__ = "0.1.0"
