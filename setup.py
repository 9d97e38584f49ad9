"""Setup script for window_measure package."""

from setuptools import setup, find_packages

setup(
    name="window_measure",
    version="1.0.0",
    description="Window measurement normalization, import and export for exterior contractors",
    author="H&F Exteriors",
    packages=find_packages(include=["window_measure", "window_measure.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pymupdf>=1.23.0",
        "pillow>=9.1.0",
        "openpyxl>=3.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "window-measure=window_measure.cli:main",
        ],
    },
)
