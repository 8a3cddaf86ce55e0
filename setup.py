from setuptools import find_packages, setup

setup(
    name="git-diffall",
    version="0.1.0",
    description="Directory-level diff of two git states in an external diff tool",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "click",  # Exceptions and exit handling under typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output models
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a tty
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "git-diffall=diffall.cli:main",
        ],
    },
)
