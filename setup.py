# setup.py
from setuptools import setup, find_packages

setup(
    name="pioneerlog",
    version="0.1.0",
    description="Named loggers with level gating, console output and size-based file rotation",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Picks up 'pioneerlog' and its subpackages
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'pioneerlog-demo=pioneerlog.interface.cli.app:main',  # Demo setup from the command line
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
