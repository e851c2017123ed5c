"""setuptools build configuration for the sticker layout engine.

Usage:
    pip install -e .            # engine + preview + bench CLI
    pip install -e .[test]      # plus pytest
"""
from setuptools import setup

MODULES = [
    'models',
    'geometry',
    'stickers',
    'packer',
    'sticker_layout',
    'preview',
    'layout_bench',
]

setup(
    name='sticker-layout',
    version='1.0.0',
    description='Bin-packing layout engine for MiniDisc album sticker sheets',
    py_modules=MODULES,
    python_requires='>=3.10',
    install_requires=['Pillow'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['sticker-layout-bench=layout_bench:main'],
    },
)
