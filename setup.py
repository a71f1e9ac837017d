from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fwgraph",
    version="0.1.0",
    author="fwgraph contributors",
    description="Generic all-pairs optimal paths (Floyd-Warshall) for networkx graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=["networkx"],
    extras_require={
        "test": ["pytest"],
        "dev": ["pytest", "line_profiler"],
    },
)
