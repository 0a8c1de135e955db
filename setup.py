"""
Setup script for the EA thank-you letter writing engine.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

from version import __version__

setup(
    name="ea-letter-writer",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["version"],
    install_requires=["python-dotenv", "python-docx"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.11",
)
