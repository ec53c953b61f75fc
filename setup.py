from setuptools import setup, find_packages
import pathlib

# Detect layout
use_src = pathlib.Path("src/maptools").exists()
pkg_args = {"package_dir": {"": "src"}, "packages": find_packages(where="src")} if use_src \
           else {"packages": find_packages(where=".")}

setup(
    name="map-tools",
    version="0.1.0",
    description="Dynamic object mapping: pick a concrete mapping from payload content",
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "PyYAML>=6",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    include_package_data=True,
    **pkg_args
)
