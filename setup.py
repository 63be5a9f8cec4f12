"""
lazyrange: Lazy, Composable Sequence Views for Python

Cursor-based adaptors that filter, map, take and zip indexable sequences
without building intermediate containers:
1. Bidirectional adaptor cursors (filter, map, take, zip, numeric values)
2. Non-owning views with size, indexing and reverse traversal
3. Deferred pipelines composed with the ``|`` operator
4. Terminal sinks materializing into lists, deques, tuples and numpy arrays
"""

from setuptools import setup, find_packages

setup(
    name="lazyrange",
    version="1.0.0",
    description="Lazy, composable sequence views with pipe-style pipelines",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="lazyrange developers",
    python_requires=">=3.10",
    packages=find_packages(include=["lazyrange", "lazyrange.*"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "tabulate>=0.9",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
