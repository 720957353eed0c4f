import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikeledger',
    version='1.0.0',
    license='MIT',
    description='In-memory bookkeeping for bike rentals.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.7',
    install_requires=[
        'bcrypt',
        'shapely',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'Faker',
        ],
    },
)
