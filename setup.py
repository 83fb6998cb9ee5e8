from setuptools import setup, find_packages

VERSION = {}  # type: ignore

with open("qintsim/__version__.py", "r") as version_file:
    exec(version_file.read(), VERSION)

if __name__ == "__main__":
    requirements = open("requirements.txt").readlines()
    requirements = [r.strip() for r in requirements if r.strip()]

    setup(
        name="qintsim",
        version=VERSION["version"],
        description="A PyTorch-based quantum integer simulator for Quantum Fourier Transform signal experiments",
        author="QIntSim Authors",
        license="MIT",
        install_requires=requirements,
        extras_require={
            "test": ["pytest>=7.0"],
        },
        python_requires=">=3.8",
        include_package_data=True,
        packages=find_packages(include=["qintsim", "qintsim.*"]),
    )
