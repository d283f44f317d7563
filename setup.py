"""
Setup script for matstore-core

Pure-Python package laid out under src/. This script handles:
1. Reading the version from src/matstore/__init__.py
2. Using README.md as the long description when present
3. Declaring the numpy/scipy runtime stack and the pytest test extra
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/matstore/__init__.py
def get_version():
    version_file = Path("src/matstore/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="matstore-core",
    version=get_version(),
    description="Zero-copy logical matrix stores with a composable view algebra",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    zip_safe=True,
)
