#!/usr/bin/env python3
"""Setup script for sqlcomponents."""

from setuptools import setup, find_packages
import os

# Read the README file
here = os.path.abspath(os.path.dirname(__file__))
try:
    with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = 'sqlcomponents - relational schema metadata for code generation'

setup(
    name='sqlcomponents',
    version='0.1.0',
    description='sqlcomponents - relational schema metadata for code generation',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='sqlcomponents Team',
    author_email='sqlcomponents@example.com',
    url='https://github.com/sqlcomponents/sqlcomponents-python',
    packages=find_packages(include=['sqlcomponents', 'sqlcomponents.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-mock>=3.11.0',
        ],
        'dev': [
            'pytest>=7.0.0',
            'pytest-mock>=3.11.0',
            'black>=23.0.0',
            'isort>=5.12.0',
            'mypy>=1.4.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Database',
    ],
    keywords='sql schema metadata code-generation',
    project_urls={
        'Source': 'https://github.com/sqlcomponents/sqlcomponents-python',
        'Tracker': 'https://github.com/sqlcomponents/sqlcomponents-python/issues',
    },
)
