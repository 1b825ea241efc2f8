# setup.py
from setuptools import setup, find_packages

setup(
    name="hma_decoder",
    version="0.1.0",
    packages=find_packages(include=['hma_decoder', 'hma_decoder.*']),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.20",
        "tqdm>=4.60",
    ],
    extras_require={
        'test': ['pytest>=7.0.0'],
    },
    python_requires=">=3.8",
    description="Decoder for HMA aerospace unit design files",
    keywords="hma, megamek, aerospace, binary, parser",
    entry_points={
        'console_scripts': [
            'hma-dump=hma_decoder.main:main',
        ],
    }
)
