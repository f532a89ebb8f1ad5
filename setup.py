"""Setup configuration for unit-tester."""

from setuptools import setup, find_packages

setup(
    name="unit-tester",
    version="0.1.0",
    description="Register named test units and describe or run them from the command line",
    packages=find_packages(include=["unit_tester", "unit_tester.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "unit-tester=unit_tester.cli:main",
        ],
    },
)
