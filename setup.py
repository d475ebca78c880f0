from setuptools import setup, find_packages

setup(
    name="releasex",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
        "pydantic>=2",
        "python-dateutil",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "releasex=releasex.cli:main",
        ],
    },
)
