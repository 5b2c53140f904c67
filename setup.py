from os import path
from setuptools import setup, find_packages


here = path.abspath(path.dirname(__file__))
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='nnkeygen',
    version='1.0.0',

    entry_points={
        'console_scripts': [
            'next-keygen = nnkeygen.keygen:main',
        ],
    },
    packages=find_packages(exclude=('tests',)),

    python_requires='>=3.6',
    install_requires=[
        'docopt>=0.6.2',
        'PyNaCl>=1.3.0',
    ],

    description='Network Next buyer key generator',
    long_description=long_description,
    long_description_content_type='text/markdown',

    author="Network Next, Inc.",

    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
    ],
)
