from setuptools import setup, find_packages

setup(
    name="friendly-files",
    version="1.0.0",
    description="Convenience wrappers around common filesystem operations",
    author="Ashwin Nair",
    packages=find_packages(include=["friendly_files", "friendly_files.*"]),
    python_requires=">=3.9",
    install_requires=[
        "argcomplete",
        "PyYAML",
        "rich",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "friendly-files = friendly_files.cli:main"
        ],
    },
)
