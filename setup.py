import re
from codecs import open
from os import path

from setuptools import setup

PACKAGE_NAME = "domdump"
HERE = path.abspath(path.dirname(__file__))
with open(path.join(HERE, "README.rst"), encoding="utf-8") as fp:
    README = fp.read()
with open(path.join(HERE, PACKAGE_NAME, "const.py"), encoding="utf-8") as fp:
    VERSION = re.search('__version__ = "([^"]+)"', fp.read()).group(1)

extras_requires = {
    "ci": ["coveralls"],
    "dev": ["packaging", "pre-commit"],
    "test": ["pytest"],
    "lint": ["flake8", "flynt", "isort"],
}
extras_requires["dev"] += extras_requires["test"] + extras_requires["lint"]

setup(
    name=PACKAGE_NAME,
    author="Joel Payne",
    author_email="lilspazjoekp@gmail.com",
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Software Development :: Testing",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Utilities",
    ],
    description="Print HTML-like node trees as indented, colored text for test failures.",
    entry_points={"console_scripts": ["domdump = domdump.main:main"]},
    extras_require=extras_requires,
    install_requires=[
        "click==8.*",
        "docutils>=0.19",
        "yachalk>=0.1.5",
    ],
    license="MIT",
    long_description=README,
    packages=["domdump"],
    url="https://github.com/LilSpazJoekp/domdump",
    version=VERSION,
)
