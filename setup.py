from setuptools import find_packages, setup

setup(
    name="typecov",
    version="0.1.0",
    description="Type coverage metrics for TypeScript and JavaScript programs",
    packages=find_packages(include=["typecov", "typecov.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration and report schemas
        "tree-sitter>=0.22",  # Syntax trees
        "tree-sitter-typescript>=0.21",  # TypeScript / TSX grammars
        "tree-sitter-javascript>=0.21",  # JavaScript grammar
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
