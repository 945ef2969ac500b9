from setuptools import setup, find_packages

setup(
    name="lucky-draw",
    version="1.0.0",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "numpy",
        "pyyaml",
        "marshmallow>=3.13.0"
    ],
    extras_require={
        "test": ["pytest<9"]
    },
    entry_points={
        "console_scripts": [
            "lucky-draw=lucky_draw.cli:main",
        ],
    },
    python_requires=">=3.8",
)
