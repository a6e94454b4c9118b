from setuptools import setup, find_packages


setup(
    name="strongbox",
    version="0.1",
    packages=find_packages(include=["strongbox", "strongbox.*"]),
    description="Passphrase encryption of small text/binary values with AES-256-CTR.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "strongbox=strongbox.cli:main",
        ]
    },
)
