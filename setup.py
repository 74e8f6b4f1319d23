"""
Setup configuration for process_flow package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text() if readme_path.exists() else ''

setup(
    name='process_flow',
    version='1.0.0',
    description='Minimal chemical-process flow network: streams, mixers and reactors',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Process Flow Team',

    packages=find_packages(exclude=['tests', 'tests.*', 'examples', 'docs']),
    package_data={
        'process_flow.config': ['schemas/*.json'],
    },

    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=6.0',
        'jsonschema>=4.0.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=3.0.0',
            'mypy>=0.990',
            'black>=22.0.0',
            'flake8>=5.0.0',
        ],
    },

    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
