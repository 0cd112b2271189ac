from pathlib import Path
from setuptools import setup, find_packages

projdir = Path(__file__).parent
readme = (projdir / 'README.md').read_text()

setup(
    name='urlp',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    description='Decompose http(s) URIs with composable grammar rules',
    license='MIT',
    python_requires='>=3.7',
    install_requires=['termcolor'],
    extras_require={
        'dev': ['pytest', 'mypy'],
    },
    entry_points={
        'console_scripts': ['urlp=urlp.cli:main']
    },
    long_description=readme,
    long_description_content_type='text/markdown',
)
