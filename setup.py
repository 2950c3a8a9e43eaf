from setuptools import find_packages, setup

setup(
    name="heapperm",
    version="0.1.0",
    description="Enumerate permutations in place with Heap's algorithm",
    packages=find_packages(),
    python_requires=">=3.11",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["heapperm = heapperm.cli:run"]},
)
