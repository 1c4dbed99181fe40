#!/usr/bin/env python

from pathlib import Path

from setuptools import find_packages, setup

module_dir = Path(__file__).resolve().parent

with open(module_dir / "README.md") as f:
    long_desc = f.read()

setup(
    name="astrorates",
    version="0.1.0",
    description="Rate coefficients for interstellar gas-grain chemical networks",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    license="modified BSD",
    packages=find_packages("src"),
    package_dir={"": "src"},
    zip_safe=False,
    include_package_data=True,
    install_requires=[
        "setuptools",
        "numpy",
        "scipy",
        "monty",
        "ruamel.yaml",
        "pymatgen",
    ],
    extras_require={"tests": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Astronomy",
        "Topic :: Scientific/Engineering :: Chemistry",
    ],
    tests_require=["pytest"],
    python_requires=">=3.8",
)
