from setuptools import setup, find_packages

setup(
    name="cutlog",
    version="0.1.0",
    description="Wire-EDM job tracker: machine hours, pause timer, job costing & QA progress",
    packages=find_packages(include=["cutlog", "cutlog.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "cutlog=cutlog.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
