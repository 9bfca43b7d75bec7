from setuptools import setup, find_packages

setup(
    name="randstat",
    version="0.1.0",
    description="Weighted random status bytes for simulating lossy or corrupt conditions",
    author="adamfilli",
    packages=find_packages(include=["randstat", "randstat.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
