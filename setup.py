from setuptools import setup, find_namespace_packages

setup(
    name="d2c",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["d2c", "d2c.*"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.2",
        "python-dotenv>=1.0",
        "docker>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "d2c=d2c.CLI.main:main",
        ],
    },
)
