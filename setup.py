from setuptools import find_packages, setup

setup(
    name="klinger",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">= 3.11",
    install_requires=[
        "colorlog",
    ],
    extras_require={
        "dev": [
            "black",
            "flake8",
            "flake8-bugbear",
            "flake8-comprehensions",
            "flake8-isort",
            "isort",
            "mypy",
            "pytest",
            "pyyaml",
            "types-pyyaml",
            "types-setuptools",
        ],
    },
)
