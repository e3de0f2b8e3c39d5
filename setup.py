from setuptools import find_packages, setup

setup(
    name="cargo-links",
    version="0.1.0",
    description="Check the links in your crate's documentation",
    packages=find_packages(include=["cargolinks", "cargolinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "rich",  # Terminal formatting and log handler
        "pydantic>=2",  # Configuration validation
        "requests",  # Shared HTTP session for link checks
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "cargo-links=cargolinks.cli:main",
        ],
    },
)
