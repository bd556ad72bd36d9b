#!/usr/bin/env python3
"""
Setup script for the Comment Board service

This setup script provides package installation and CLI entry points
for the comment board API and command-line tool.
"""

from setuptools import setup, find_packages
import os
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("Python 3.10 or higher is required")

# Read version from package
def get_version():
    """Extract version from package"""
    version_file = os.path.join(os.path.dirname(__file__), 'src', 'commentboard', '__init__.py')
    if os.path.exists(version_file):
        with open(version_file) as f:
            for line in f:
                if line.startswith('__version__'):
                    return line.split('=')[1].strip().strip('"\'')
    return "1.0.0"

# Read long description from README
def get_long_description():
    """Read long description from README file"""
    readme_file = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_file):
        with open(readme_file, 'r', encoding='utf-8') as f:
            return f.read()
    return "Append-only comment board with tag-based cache invalidation"

# Core dependencies
INSTALL_REQUIRES = [
    "fastapi>=0.110.0",
    "pydantic>=2.0.0",
    "python-multipart>=0.0.9",
    "uvicorn>=0.27.0",
    "httpx>=0.27.0",
    "click>=8.0.0",
    "python-dotenv>=0.19.0",
]

# Development dependencies
EXTRAS_REQUIRE = {
    'dev': [
        "pytest>=7.0.0",
        "pytest-asyncio>=0.23.0",
        "pytest-cov>=4.0.0",
        "black>=23.0.0",
        "flake8>=6.0.0",
        "mypy>=1.0.0"
    ],
    'test': [
        "pytest>=7.0.0",
        "pytest-asyncio>=0.23.0",
        "pytest-cov>=4.0.0"
    ]
}

setup(
    name="commentboard",
    version=get_version(),
    description="Append-only comment board with tag-based cache invalidation",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    author="Comment Board Team",

    # Package configuration
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,

    python_requires=">=3.10",

    # Dependencies
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,

    # CLI entry points
    entry_points={
        'console_scripts': [
            'commentboard=commentboard.cli.main:main',
            'commentboard-server=commentboard.main:main',
        ],
    },

    # Package metadata
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Web Environment",
        "Framework :: FastAPI",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Message Boards",
    ],

    keywords=["comments", "fastapi", "cache", "optimistic-ui", "validation"],

    zip_safe=False,
)
