#!python

import os.path
import re

from setuptools import find_packages, setup

HERE = os.path.abspath(os.path.dirname(__file__))


def versionstring():
    # fsalib/__init__.py imports loguru, which is not available at build time
    with open(os.path.join(HERE, "src", "fsalib", "__init__.py")) as f:
        match = re.search(r"^__version__ = \(([\d, ]+)\)", f.read(), re.M)
    return ".".join(n.strip() for n in match.group(1).split(","))


if __name__ == "__main__":
    setup(
        name="fsalib",
        version=versionstring(),
        package_dir={"": "src"},
        packages=find_packages("src"),
        description="Deterministic and nondeterministic finite automata with lambda transitions.",
        long_description=open(os.path.join(HERE, "README.md")).read(),
        long_description_content_type="text/markdown",
        license="Two-clause BSD license",
        keywords="automata dfa nfa epsilon closure",
        zip_safe=True,
        python_requires=">=3.8",
        install_requires=[
            "cached-property>=1.5.2",
            "loguru>=0.7.2",
        ],
        extras_require={
            "test": [
                "pytest>=8.3.2",
            ],
        },
        entry_points={
            "console_scripts": ["fsalib=fsalib.__main__:main"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: BSD License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Scientific/Engineering :: Mathematics",
        ],
    )
