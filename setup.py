from pathlib import Path
from setuptools import find_packages, setup

README = Path(__file__).parent / "SPEC_FULL.md"

setup(
    name="interpolator",
    version="1.0.0",
    description="Single-pass %{name|filters} placeholder interpolation with pluggable filters",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    license="MIT",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["interpolator", "interpolator.*"]),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["interpolator = interpolator.cli:main"]},
)
