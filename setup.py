# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mdimports",
    version="1.0.0",
    description="Recursive '@path' import resolver for markdown documents",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mdimports", "mdimports.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'mdimports=mdimports.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
