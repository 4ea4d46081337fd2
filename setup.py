from setuptools import setup, find_packages

setup(
    name="aurwalk",
    version="0.1.0",
    description="AUR helper that resolves, fetches and builds packages with their AUR dependencies.",
    license="GPL-3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rich>=13.0.0",
        "PyYAML>=6.0",
        "GitPython>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "aurwalk=aurwalk.modules.cli:main",
        ],
    },
)
