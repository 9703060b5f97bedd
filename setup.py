from setuptools import setup, find_packages

setup(
    name="chaincalc",
    version="0.1.0",
    description="chaincalc — integer calculator with a linked undo/redo history",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "chaincalc=chaincalc.main:main",
        ],
    },
)
