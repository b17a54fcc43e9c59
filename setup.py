# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="statwrap-workflow",
    version="0.1.0",
    description="Dependency graph and tree builder for StatWrap project assets",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["statwrap", "statwrap.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'statwrap-workflow=statwrap.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
