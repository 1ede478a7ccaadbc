from setuptools import setup, find_packages

from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="ladle",
    version="1.0",
    description="A justfile-style command recipe runner.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/lainproliant/ladle",
    author="Lain Musgrove (lainproliant)",
    author_email="lain.proliant@gmail.com",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Build Tools",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
    ],
    keywords="build make just recipes",
    packages=find_packages(),
    install_requires=["xeno>=4.1.0,<5", "ansilog", "tree-format"],
    extras_require={"test": ["pytest"]},
    package_data={'ladle': []},
    data_files=[],
    entry_points={"console_scripts": ['ladle=ladle.cli:main']},
)
