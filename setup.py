# setup.py
from setuptools import setup, find_packages

setup(
    name="linmath",
    version="1.0.0",
    description="Minimal linear algebra primitives: Vec2/3/4, Point, Mat3/Mat4",
    packages=find_packages(include=["linmath", "linmath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
