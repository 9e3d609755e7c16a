from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="recolor",
    version="0.1.0",
    description="Recolor any command output",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="http://github.com/samwho/recolor",
    license="MIT",
    packages=find_packages(exclude=["tests"]),
    package_data={"recolor": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "tyro>=0.8.0",
        "typing_extensions>=4.0.0",
        "pyyaml",
        "termcolor>=3.3.0",
    ],
    extras_require={
        "testing": [
            "pytest",
            "pytest-cov",
        ],
        "type-checking": [
            "mypy",
            "types-PyYAML",
        ],
    },
    entry_points={
        "console_scripts": ["recolor=recolor._cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
