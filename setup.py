from setuptools import setup, find_packages


setup(
    name="merkleroot",
    version="0.1",
    packages=find_packages(include=["merkleroot", "merkleroot.*"]),
    description="Compute the binary Merkle tree root hash of a file over fixed-size blocks.",
    author="vercingetorx",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    entry_points={
        "console_scripts": [
            "merkleroot=merkleroot.cli:main",
        ]
    },
)
