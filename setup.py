from setuptools import setup, find_packages

from os import path
this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='searchpath',
    version='0.1.0',
    description='Search for a file in a path-like environment variable.',
    long_description_content_type='text/markdown',
    long_description=long_description,
    license='GNU GPL',
    packages=find_packages(exclude=['tests']),
    package_data={'searchpath': ['logging.toml']},
    python_requires='>=3.10',
    install_requires=open('requirements.txt').readlines(),
    extras_require={'test': ['pytest']},
)
