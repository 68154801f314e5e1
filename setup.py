# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="skeldir",
    version="1.1.0",
    description="Scaffold project folders from templates or from pasted directory trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["skeldir*"]),
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # GUI used when launched without arguments
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'skeldir=skeldir.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
