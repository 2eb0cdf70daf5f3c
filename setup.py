from setuptools import find_packages, setup

setup(
    name="sizehuman",
    version="0.1.0",
    description="Convert bit and byte counts to and from SI, IEC and JEDEC units",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"sizehuman": ["standards.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
