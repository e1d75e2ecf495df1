# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filez-mcp",
    version="1.0.0",
    description="Directory Walker MCP Server: recursive, root-confined directory listing",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filez_mcp", "filez_mcp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastmcp>=2.10",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        'console_scripts': [
            'filez-mcp=filez_mcp.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
