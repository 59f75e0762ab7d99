"""Setup script for UI Tree Paths."""

from setuptools import setup, find_packages

# Read README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ui-tree-paths",
    version="0.1.0",
    author="UI Tree Paths Contributors",
    description="Path expressions for selecting nodes of window and accessibility trees",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ui_tree_paths", "ui_tree_paths.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "psutil>=5.9.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ui-tree-paths=ui_tree_paths.cli:main",
        ],
    },
)
