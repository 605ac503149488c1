# setup.py
from setuptools import setup, find_packages

setup(
    name="txanalyzer",
    version="0.1.0",
    description="Query and aggregate an in-memory collection of card transactions",
    packages=find_packages(include=["txanalyzer", "txanalyzer.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "pandas>=1.1",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "txanalyzer=txanalyzer.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
