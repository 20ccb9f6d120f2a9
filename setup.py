"""Setup script for the Math Notation Core library"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="math-notation-core",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Expression model, LaTeX compiler and bracket-matrix text format for math notes editors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/math-notation-core",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"math_notation": ["data/*.yaml"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Text Processing :: Markup :: LaTeX",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=5.4.0",
        "regex>=2021.8.0",
    ],
    extras_require={
        "dev": ["pytest>=6.0.0", "pytest-cov>=2.10.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
