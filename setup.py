import runpy

from setuptools import setup

_const = runpy.run_path("argkit/const.py")
VERSION_STR = _const["VERSION_STR"]
DESCRIPTION = _const["DESCRIPTION"]

setup(
    name="argkit",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["argkit"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argkit = argkit:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
