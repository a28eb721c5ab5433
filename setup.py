from setuptools import setup, find_packages


setup(
    name="sixword",
    version="0.1",
    packages=find_packages(include=["sixword", "sixword.*"]),
    description="Encode binary data as S/Key six-word sentences (RFC 2289/1751) with parity checking.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "sixword=sixword.cli:main",
        ]
    },
)
