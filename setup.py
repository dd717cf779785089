from setuptools import setup, find_packages

setup(
    name="termbox",
    version="0.1.0",
    description="A multi-line input frame pinned to the bottom of the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "termbox=termbox.cli:main",
        ],
    },
    python_requires=">=3.9",
)
