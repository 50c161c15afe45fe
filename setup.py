# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirspace",
    version="1.0.0",
    description="In-memory directory namespace with an HTTP API and a text-command frontend",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirspace*"]),
    package_data={"dirspace.interface": ["locales/*.json"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "requests",
        "fastapi",
        "pydantic>=2",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        'console_scripts': [
            'dirspace=dirspace.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
