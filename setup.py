from setuptools import setup, find_packages

setup(
    name="dualquat",
    version="1.0.0",
    description="Dual quaternion algebra for rigid body transforms and pose integration",
    packages=find_packages(include=["dualquat", "dualquat.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
