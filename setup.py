from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.org").read_text(encoding="utf-8")

setup(
    name="ckv",
    version="0.1.0",
    description="Parser, in-place editor and serializer for ckv key-value files",
    long_description=long_description,
    long_description_content_type="text/x-org",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    keywords="configuration config ckv key-value parsing serialization",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ckv=ckv.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Markup",
        "Topic :: System :: Systems Administration",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
