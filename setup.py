"""Setup script for the Solana RPC Gateway."""

import os
from setuptools import setup, find_packages

# Get description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get version from package
about = {}
with open(os.path.join("solana_gateway", "__init__.py"), "r", encoding="utf-8") as f:
    exec(f.read(), about)

# Get dependencies from requirements.txt
with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [line.strip() for line in f.readlines()
                    if line.strip() and not line.startswith("#")]

setup(
    name="solana-rpc-gateway",
    version=about["__version__"],
    description="A minimal HTTP gateway over a Solana JSON-RPC node",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__email__"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.25",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Framework :: FastAPI",
        "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "solana-gateway=solana_gateway.__main__:main",
        ],
    },
)
