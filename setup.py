from setuptools import setup, find_packages

setup(
    name="pybake",
    version="0.1.0",
    description="A simple build system for C/C++",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["c", "c++", "build"],
    python_requires=">=3.11",
    packages=find_packages(include=["pybake", "pybake.*"]),
    install_requires=[
        "returns",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pybake = pybake.main:main",
        ]
    },
)
