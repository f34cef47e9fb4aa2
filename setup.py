import setuptools
from pathlib import Path

with Path("README.md").open(encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="eventlayout",
    version="0.1.0",
    author="eventlayout contributors",
    description="Side-by-side layout of overlapping calendar events in a day column",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=setuptools.find_packages(exclude=["*.tests", "*.tests.*"]),
    entry_points={
        "console_scripts": [
            "eventlayout=eventlayout.__main__:main",
        ],
    },
    python_requires=">=3.9",
)
