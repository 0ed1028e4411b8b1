from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="rpncalc",
    description="Infix math expression calculator using Shunting-Yard conversion and RPN evaluation.",
    provides=["rpncalc"],
    license="GPL-3.0-or-later",
    version="0.0.1",
    packages=find_packages(include=["rpncalc", "rpncalc.*"]),
    python_requires=">=3.11",
    install_requires=requirements,
    entry_points={
        "console_scripts": [
            "rpncalc=rpncalc.cli:main",
        ],
    },
)
