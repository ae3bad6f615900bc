"""
Setup script for qpml - a pure Python package, there are no extensions to build.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "qpml"

# Read version and metadata
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

# Setup configuration
setup(
    name=LIBRARY,
    version=__version__,
    description="Query plans as Query Plan Markup Language (QPML) documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.9",
    install_requires=[
        "orjson",
        "python-dotenv",
        "PyYAML",
    ],
    extras_require={
        "opteryx": ["opteryx"],
        "tests": ["hypothesis", "pytest", "rich"],
    },
    entry_points={"console_scripts": ["qpml=qpml.__main__:main"]},
    zip_safe=False,
)
