from setuptools import setup, find_packages

setup(
    name="connect4-minimax",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-minimax=connect4_minimax.interfaces.cli:main",
        ],
    },
)
