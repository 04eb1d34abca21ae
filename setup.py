# Package installation script

from setuptools import setup, find_namespace_packages

setup(
    name="trdp_config",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["trdp_config", "trdp_config.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "trdp_config=trdp_config.__main__:main",
        ],
    },
    install_requires=[
        "fastapi",
        "hypercorn",
        "pyyaml",
        "aiosqlite",
        "pydantic>=2",
        "lxml",
        "python-multipart",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
)
