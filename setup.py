from setuptools import find_packages, setup

setup(
    name="xds-server",
    version="0.6.0",
    description="XDS server - build-server folders mirroring client workspaces",
    packages=find_packages(include=["xds", "xds.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and folder models
        "typer",  # CLI
        "click",  # CLI context handling (typer dependency, used directly)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "requests",  # REST client for folder commands
        "fastapi",  # REST API
        "uvicorn",  # ASGI server
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "httpx",  # FastAPI TestClient transport
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "xdsd=xds.cli:main",
        ],
    },
)
