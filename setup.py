"""
Setup configuration for hvac_engine package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text() if readme_path.exists() else ''

setup(
    name='hvac_engine',
    version='1.0.0',
    description='Humid air process calculations for HVAC air handling lines',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='HVAC Engine Team',

    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'hvac_engine.config': ['engine_defaults.yaml', 'schemas/*.json'],
    },

    install_requires=[
        'numpy>=1.21.0',
        'numba>=0.55.0',
        'scipy>=1.8.0',
        'pydantic>=2.0',
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
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
