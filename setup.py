import re

from setuptools import setup


version = ""
with open("staticurl/__init__.py") as f:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', f.read(), re.MULTILINE).group(1)

requirements = []
with open("requirements.txt") as f:
    requirements = f.read().splitlines()


setup(
    name="staticurl",
    description="Simple and fast flat-file based url shortener without any database.",
    version=version,
    packages=["staticurl"],
    package_data={"staticurl": ["templates/*"]},
    include_package_data=True,
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["staticurl = staticurl.__main__:main"]},
    python_requires=">=3.9",
)
